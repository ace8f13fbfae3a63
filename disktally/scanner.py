from __future__ import annotations
import os
import time
import stat as statmod
import logging
from typing import List, Optional
from .models import ScanEntry, ScanResult, ScanStats
from .log import logger

DEFAULT_MAX_DEPTH = 2


class DiskTallyError(Exception):
    pass


class RootAccessError(DiskTallyError):
    def __init__(self, path: str, error: OSError):
        super().__init__(f"Cannot read directory '{path}': {error.strerror or error}")
        self.path = path
        self.error = error


def _warn(log: logging.Logger, stats: Optional[ScanStats], msg: str, path: str, exc: OSError):
    if stats is not None:
        stats.errors += 1
    # traceback only under --verbose
    log.warning(msg, path, exc, exc_info=log.isEnabledFor(logging.DEBUG))


def _list_dir(path: str) -> List[os.DirEntry]:
    with os.scandir(path) as it:
        return list(it)


def _entry_is_dir(entry: os.DirEntry, follow_symlinks: bool) -> bool:
    if entry.is_symlink() and not follow_symlinks:
        return False
    return entry.is_dir(follow_symlinks=follow_symlinks)


def compute_size(path: str,
                 remaining_depth: int,
                 *,
                 follow_symlinks: bool = False,
                 stats: Optional[ScanStats] = None,
                 log: Optional[logging.Logger] = None) -> int:
    """Best-effort recursive size of ``path`` in bytes.

    Files contribute their length whatever the depth. A directory is listed
    and its subdirectories are measured with ``remaining_depth - 1``; once the
    budget drops below zero a directory contributes nothing. Any ``OSError``
    met on the way is logged as a warning and counted as zero, so this never
    raises for filesystem failures.
    """
    log = log or logger
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as e:
        _warn(log, stats, "Cannot access %s: %s", path, e)
        return 0

    if not statmod.S_ISDIR(st.st_mode):
        if stats is not None:
            stats.files += 1
        return int(st.st_size)

    if remaining_depth < 0:
        log.debug("Depth limit reached at %s", path)
        if stats is not None:
            stats.truncated += 1
        return 0

    log.debug("Descending into %s (remaining depth %d)", path, remaining_depth)
    try:
        children = _list_dir(path)
    except OSError as e:
        _warn(log, stats, "Cannot list directory %s: %s", path, e)
        return 0
    if stats is not None:
        stats.dirs += 1

    total = 0
    for entry in children:
        try:
            if _entry_is_dir(entry, follow_symlinks):
                total += compute_size(entry.path, remaining_depth - 1,
                                      follow_symlinks=follow_symlinks, stats=stats, log=log)
            else:
                total += int(entry.stat(follow_symlinks=follow_symlinks).st_size)
                if stats is not None:
                    stats.files += 1
        except OSError as e:
            _warn(log, stats, "Skipping %s: %s", entry.path, e)
    return total


def scan(root: str,
         max_depth: int = DEFAULT_MAX_DEPTH,
         *,
         follow_symlinks: bool = False,
         log: Optional[logging.Logger] = None) -> ScanResult:
    """Measure every immediate child of ``root``.

    Each subdirectory is handed to :func:`compute_size` with the full
    ``max_depth`` budget, so ``max_depth`` counts levels below each child, not
    below ``root``. A child that fails is logged and left out of the result.
    Failing to list ``root`` itself raises :class:`RootAccessError`.

    Entries come back in listing order; use ``utils.sort_entries`` to present.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    log = log or logger
    t0 = time.time()
    root = os.path.abspath(root)
    stats = ScanStats()

    log.debug("Scan root=%s max_depth=%d follow_symlinks=%s", root, max_depth, follow_symlinks)
    try:
        children = _list_dir(root)
    except OSError as e:
        raise RootAccessError(root, e) from e

    entries: List[ScanEntry] = []
    for entry in children:
        log.debug("Item: %s", entry.path)
        try:
            if _entry_is_dir(entry, follow_symlinks):
                size = compute_size(entry.path, max_depth,
                                    follow_symlinks=follow_symlinks, stats=stats, log=log)
            else:
                size = int(entry.stat(follow_symlinks=follow_symlinks).st_size)
                stats.files += 1
        except OSError as e:
            _warn(log, stats, "Omitting %s: %s", entry.path, e)
            continue
        entries.append(ScanEntry(path=entry.path, size=size))

    elapsed = time.time() - t0
    log.debug("Scanned %d files in %d dirs, %d errors, %d truncated, %.2f sec",
              stats.files, stats.dirs, stats.errors, stats.truncated, elapsed)
    return ScanResult(
        root=root,
        entries=entries,
        item_count=len(children),
        stats=stats,
        elapsed_sec=elapsed
    )
