"""Logging utilities for disktally."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import settings

logger = logging.getLogger("disktally")


def init_logging(verbose: bool = False, level: Optional[str] = None) -> None:
    """Send the package logger to stderr.

    WARNING by default, DEBUG when verbose. An explicit level name (argument
    or DISKTALLY_LOG_LEVEL) wins over both.
    """
    level = level or settings.log_level
    if level:
        logger.setLevel(level.upper())
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.log_format))
        logger.addHandler(handler)
