from __future__ import annotations
from typing import Iterable, List
from .models import ScanEntry

UNITS = ["B", "KB", "MB", "GB", "TB"]

def format_bytes(num: int) -> str:
    if num < 0:
        return str(num)
    x = float(num)
    unit = UNITS[0]
    for u in UNITS[1:]:
        # keep dividing at exactly 1024 so 1048576 prints as 1.00 MB, not 1024.00 KB
        if x < 1024.0:
            break
        x /= 1024.0
        unit = u
    return f"{x:.2f} {unit}"

def format_size(num: int, human_readable: bool = False) -> str:
    if human_readable:
        return format_bytes(num)
    return f"{num} bytes"

def sort_entries(entries: Iterable[ScanEntry]) -> List[ScanEntry]:
    # size desc, ties by path so output is stable
    return sorted(entries, key=lambda e: (-e.size, e.path))
