from __future__ import annotations
import os
from typing import Optional
import psutil

def volume_usage(path: str) -> Optional[dict]:
    try:
        u = psutil.disk_usage(os.path.abspath(path))
    except OSError:
        return None
    return {
        "total": int(u.total),
        "used": int(u.used),
        "free": int(u.free),
        "percent": float(u.percent),
    }
