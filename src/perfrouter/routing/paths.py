"""
Run identity and path resolution.

Every run works on a private snapshot of the live perfdata file. The snapshot
name carries a nonce built from the wall-clock second, the process id and a
random token, so two runs of the same category never share a snapshot even
when they start within the same second.
"""

import os
import secrets
import time
from typing import Optional

from ..models.config import RouterConfig
from ..models.runtime import Category, RunContext, RunPaths


def make_nonce(now: Optional[float] = None, pid: Optional[int] = None) -> str:
    """
    Build a snapshot suffix unique to this run.

    Args:
        now: Seconds since the epoch, defaults to the current time
        pid: Process id, defaults to the current process

    Returns:
        Suffix of the form ``<unixtime>-<pid>-<8 hex chars>``
    """
    seconds = int(time.time() if now is None else now)
    process_id = os.getpid() if pid is None else pid
    return f"{seconds}-{process_id}-{secrets.token_hex(4)}"


def build_run_paths(config: RouterConfig, category: Category, timestamp: int, nonce: str) -> RunPaths:
    live_file = config.live_base_dir / category.live_file_name
    output_name = category.output_file_name(timestamp)
    return RunPaths(
        live_file=live_file,
        snapshot_file=live_file.with_name(f"{category.live_file_name}-{nonce}"),
        spool_a_file=config.spool_a_dir / output_name,
        spool_b_file=config.spool_b_dir / output_name,
    )


def build_run_context(
    config: RouterConfig,
    category: Category,
    timestamp: int,
    nonce: Optional[str] = None,
) -> RunContext:
    """Resolve everything a run needs to know about its files."""
    if nonce is None:
        nonce = make_nonce()
    return RunContext(
        category=category,
        timestamp=timestamp,
        nonce=nonce,
        paths=build_run_paths(config, category, timestamp, nonce),
    )
