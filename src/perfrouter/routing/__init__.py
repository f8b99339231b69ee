"""
Snapshot and fan-out of perfdata files to spool directories.
"""

from .paths import build_run_context, build_run_paths, make_nonce
from .router import PerfdataRouter, route

__all__ = [
    "PerfdataRouter",
    "route",
    "build_run_context",
    "build_run_paths",
    "make_nonce",
]
