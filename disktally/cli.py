from __future__ import annotations

import argparse
import json
import os
import sys
from dataclasses import asdict
from typing import List, Optional

from .config import settings
from .drives import volume_usage
from .log import init_logging, logger
from .models import ScanResult
from .scanner import RootAccessError, scan
from .utils import format_bytes, format_size, sort_entries

APP_NAME = "disktally"


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Show the size of every item directly under a directory, largest first.",
    )
    p.add_argument("path", nargs="?", default=".", help="directory to scan (default: current directory)")
    p.add_argument("-d", "--depth", type=_non_negative_int, default=settings.default_depth,
                   help="levels to recurse below each item (default: %(default)s)")
    p.add_argument("-H", "--human-readable", action="store_true", help="print sizes as B/KB/MB/GB/TB")
    p.add_argument("-v", "--verbose", action="store_true", help="diagnostic output on stderr")
    p.add_argument("--follow-symlinks", action="store_true", help="descend into symlinked directories")
    p.add_argument("-n", "--top", type=_non_negative_int, default=None, metavar="N",
                   help="only print the N largest items")
    p.add_argument("--json", action="store_true", help="print the result as JSON")
    p.add_argument("--volume", action="store_true", help="also report usage of the volume holding PATH")
    return p


def _error(msg: str) -> int:
    print(f"Error: {msg}", file=sys.stderr)
    return 1


def render_text(result: ScanResult, human_readable: bool = False, top: Optional[int] = None) -> List[str]:
    entries = sort_entries(result.entries)
    if top is not None:
        entries = entries[:top]
    lines = [
        f"Scanning directory: {result.root}",
        f"Found {result.item_count} items",
    ]
    lines += [f"{e.path}\t{format_size(e.size, human_readable)}" for e in entries]
    lines.append(f"Total size: {format_size(result.total, human_readable)}")
    return lines


def render_json(result: ScanResult, top: Optional[int] = None, volume: Optional[dict] = None) -> str:
    entries = sort_entries(result.entries)
    if top is not None:
        entries = entries[:top]
    data = {
        "root": result.root,
        "total": result.total,
        "item_count": result.item_count,
        "entries": [asdict(e) for e in entries],
        "stats": asdict(result.stats),
        "elapsed_sec": result.elapsed_sec,
    }
    if volume is not None:
        data["volume"] = volume
    return json.dumps(data, ensure_ascii=False, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    init_logging(verbose=args.verbose)

    root = os.path.abspath(args.path)
    logger.debug("Parameters: path=%s depth=%d human_readable=%s follow_symlinks=%s",
                 root, args.depth, args.human_readable, args.follow_symlinks)

    if not os.path.exists(root):
        return _error(f"Path '{root}' does not exist.")
    if not os.path.isdir(root):
        return _error(f"Path '{root}' is not a directory.")

    try:
        result = scan(root, args.depth, follow_symlinks=args.follow_symlinks)
    except RootAccessError as e:
        logger.debug("Root listing failed", exc_info=e.error)
        return _error(f"{e}. Try running with elevated privileges (e.g. sudo or as Administrator).")

    u = volume_usage(root) if args.volume else None
    if args.json:
        print(render_json(result, args.top, u))
        return 0

    for line in render_text(result, args.human_readable, args.top):
        print(line)
    if u is not None:
        print(f"Volume: {format_bytes(u['used'])} used of {format_bytes(u['total'])} "
              f"({u['percent']:.1f}%), {format_bytes(u['free'])} free")
    return 0


if __name__ == "__main__":
    sys.exit(main())
