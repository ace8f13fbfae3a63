"""Runtime defaults for disktally, overridable from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def _env_level(name: str) -> Optional[str]:
    raw = (os.getenv(name) or "").strip().upper()
    if not raw or not isinstance(logging.getLevelName(raw), int):
        return None
    return raw


@dataclass
class Settings:
    """Application settings."""

    default_depth: int = 2
    log_level: Optional[str] = None
    log_format: str = "%(levelname)s: %(message)s"


settings = Settings(
    default_depth=_env_int("DISKTALLY_DEPTH", 2),
    log_level=_env_level("DISKTALLY_LOG_LEVEL"),
)
