"""Pytest configuration for tests."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Add the project root to the Python path so "import disktally" works
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _reset_logger():
    log = logging.getLogger("disktally")
    yield
    for h in list(log.handlers):
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)


@pytest.fixture
def tree(tmp_path):
    """Build a small directory tree.

    root/
      a.bin            100
      sub/
        b.bin          200
        deep/
          c.bin        400
          deeper/
            d.bin      800
      empty/
    """
    root = tmp_path / "root"
    (root / "sub" / "deep" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.bin").write_bytes(b"x" * 100)
    (root / "sub" / "b.bin").write_bytes(b"x" * 200)
    (root / "sub" / "deep" / "c.bin").write_bytes(b"x" * 400)
    (root / "sub" / "deep" / "deeper" / "d.bin").write_bytes(b"x" * 800)
    return root
