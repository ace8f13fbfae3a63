from .models import ScanEntry, ScanResult, ScanStats
from .scanner import DiskTallyError, RootAccessError, compute_size, scan

__all__ = [
    "ScanEntry", "ScanResult", "ScanStats",
    "DiskTallyError", "RootAccessError", "compute_size", "scan",
]
__version__ = "0.1.0"
