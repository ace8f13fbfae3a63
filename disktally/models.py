from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class ScanEntry:
    path: str
    size: int = 0

@dataclass
class ScanStats:
    files: int = 0
    dirs: int = 0
    errors: int = 0
    truncated: int = 0  # dirs cut off by the depth budget

@dataclass
class ScanResult:
    root: str
    entries: List[ScanEntry] = field(default_factory=list)
    item_count: int = 0
    stats: ScanStats = field(default_factory=ScanStats)
    elapsed_sec: float = 0.0

    @property
    def total(self) -> int:
        return sum(e.size for e in self.entries)
