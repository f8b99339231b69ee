"""
Configuration data models.

This module contains the configuration structure that tells the router where
the live perfdata files are written and where the two optional spool
directories live.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

# Historical locations used by OP5 Monitor / Naemon installations.
DEFAULT_LIVE_BASE_DIR = Path("/opt/monitor/var")
DEFAULT_SPOOL_A_DIR = DEFAULT_LIVE_BASE_DIR / "nagfluxspool" / "perfdata"
DEFAULT_SPOOL_B_DIR = DEFAULT_LIVE_BASE_DIR / "spool" / "perfdata"


@dataclass
class RouterConfig:
    """
    Filesystem locations used by a routing run.

    Attributes:
        live_base_dir: Directory the monitoring host appends the live
            `host-perfdata` / `service-perfdata` files to. Snapshots are
            taken in the same directory.
        spool_a_dir: Spool directory that receives a *copy* of the data
            (Nagflux). Optional at run time.
        spool_b_dir: Spool directory that receives the data by *move*
            (PNP). Optional at run time.
    """

    live_base_dir: Path = DEFAULT_LIVE_BASE_DIR
    spool_a_dir: Path = DEFAULT_SPOOL_A_DIR
    spool_b_dir: Path = DEFAULT_SPOOL_B_DIR

    def __post_init__(self):
        # Accept plain strings from callers and keep the `/` joins working.
        self.live_base_dir = Path(self.live_base_dir)
        self.spool_a_dir = Path(self.spool_a_dir)
        self.spool_b_dir = Path(self.spool_b_dir)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a dictionary of path strings."""
        return {
            "live_base_dir": str(self.live_base_dir),
            "spool_a_dir": str(self.spool_a_dir),
            "spool_b_dir": str(self.spool_b_dir),
        }
