"""
Runtime data models.

This module contains data structures used during a single routing run,
including the perfdata category and the paths derived for the run.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Category(Enum):
    """Kind of perfdata a run handles."""
    HOST = "host"
    SERVICE = "service"

    @property
    def live_file_name(self) -> str:
        # e.g. "host-perfdata"
        return f"{self.value}-perfdata"

    def output_file_name(self, timestamp: int) -> str:
        """Name of the file handed to a spool, e.g. ``host_perfdata.1543412003``."""
        return f"{self.value}_perfdata.{timestamp}"


@dataclass
class RunPaths:
    """
    A container for all file paths touched by a single routing run.
    """

    # File the monitoring host keeps appending to.
    live_file: Path
    # Private copy of the live file, named with the run nonce.
    snapshot_file: Path
    # Final file in the copy spool (spool A).
    spool_a_file: Path
    # Final file in the move spool (spool B).
    spool_b_file: Path

    @property
    def spool_a_dir(self) -> Path:
        return self.spool_a_file.parent

    @property
    def spool_b_dir(self) -> Path:
        return self.spool_b_file.parent


@dataclass
class RunContext:
    """
    Everything that identifies one invocation: what is routed, for which
    event, and where it goes.
    """

    category: Category
    timestamp: int
    nonce: str
    paths: RunPaths
