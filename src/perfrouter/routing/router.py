"""
Perfdata routing.

This module moves the live host or service perfdata file of a monitoring host
into whichever downstream spool directories exist on the machine:

1. Snapshot: rename the live file to a run-private snapshot.
2. Spool A (Nagflux): if the directory exists, copy the snapshot into it.
3. Spool B (PNP): if the directory exists, move the snapshot into it.
4. Cleanup: delete the snapshot if it is still there.

Steps 2 to 4 are attempted independently; a failure in one is logged and the
remaining steps still run. If neither spool exists the data is discarded.
"""

import errno
import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Optional, Union

from ..config import get_config
from ..models.config import RouterConfig
from ..models.results import RouteResult, StepResult, StepStatus
from ..models.runtime import Category, RunContext
from ..validation import (
    handle_file_error,
    validate_enum_choice,
    validate_non_negative_integer,
)
from .paths import build_run_context, make_nonce

logger = logging.getLogger(__name__)


class PerfdataRouter:
    """
    Routes one perfdata snapshot per call to the available spool directories.

    Args:
        config: Filesystem locations, defaults to the process configuration
        nonce_factory: Callable returning the snapshot suffix for a run
    """

    def __init__(
        self,
        config: Optional[RouterConfig] = None,
        nonce_factory: Callable[[], str] = make_nonce,
    ):
        self.config = config or get_config()
        self.nonce_factory = nonce_factory

    def route(self, category: Union[Category, str], timestamp: Union[int, str]) -> RouteResult:
        """
        Run the snapshot, copy, move and cleanup sequence for one event.

        Args:
            category: `host` or `service`
            timestamp: Event time used to name the files handed to the spools

        Returns:
            RouteResult with one StepResult per step that ran

        Raises:
            ValidationError: If category or timestamp is invalid. Nothing on
                disk is touched in that case.
        """
        if not isinstance(category, Category):
            category = validate_enum_choice(category, Category, field_name="category")
        timestamp = validate_non_negative_integer(timestamp, field_name="timestamp")

        context = build_run_context(self.config, category, timestamp, self.nonce_factory())
        result = RouteResult()

        snapshot = self._take_snapshot(context)
        result.steps.append(snapshot)
        if snapshot.status is not StepStatus.DONE:
            return result

        result.steps.append(self._copy_to_spool_a(context))
        result.steps.append(self._move_to_spool_b(context))
        result.steps.append(self._remove_snapshot(context))

        result.snapshot_left = context.paths.snapshot_file.exists()
        if result.snapshot_left:
            logger.error(f"Snapshot {context.paths.snapshot_file} was left behind")
        return result

    def _take_snapshot(self, context: RunContext) -> StepResult:
        paths = context.paths
        if not paths.live_file.exists():
            logger.debug(f"No {context.category.value} perfdata at {paths.live_file}, nothing to route")
            return StepResult("snapshot", StepStatus.SKIPPED)

        try:
            paths.live_file.rename(paths.snapshot_file)
        except FileNotFoundError:
            # Vanished between the check and the rename.
            logger.debug(f"{paths.live_file} disappeared before it could be snapshotted")
            return StepResult("snapshot", StepStatus.SKIPPED)
        except OSError as e:
            handle_file_error(
                error=e,
                context=f"snapshot of {paths.live_file}",
                reraise=False,
                log=logger,
            )
            return StepResult("snapshot", StepStatus.FAILED, error=str(e))

        logger.debug(f"Snapshotted {paths.live_file} to {paths.snapshot_file}")
        return StepResult("snapshot", StepStatus.DONE, destination=paths.snapshot_file)

    def _copy_to_spool_a(self, context: RunContext) -> StepResult:
        paths = context.paths
        if not paths.spool_a_dir.is_dir():
            logger.debug(f"Spool directory {paths.spool_a_dir} not present, skipping copy")
            return StepResult("copy_spool_a", StepStatus.SKIPPED)

        try:
            _stage_into(paths.snapshot_file, paths.spool_a_file, context.nonce)
        except OSError as e:
            handle_file_error(
                error=e,
                context=f"copy to {paths.spool_a_file}",
                reraise=False,
                log=logger,
            )
            return StepResult("copy_spool_a", StepStatus.FAILED, error=str(e))

        logger.info(f"Copied {context.category.value} perfdata to {paths.spool_a_file}")
        return StepResult("copy_spool_a", StepStatus.DONE, destination=paths.spool_a_file)

    def _move_to_spool_b(self, context: RunContext) -> StepResult:
        paths = context.paths
        if not paths.spool_b_dir.is_dir():
            logger.debug(f"Spool directory {paths.spool_b_dir} not present, skipping move")
            return StepResult("move_spool_b", StepStatus.SKIPPED)

        try:
            try:
                paths.snapshot_file.replace(paths.spool_b_file)
            except OSError as e:
                if e.errno != errno.EXDEV:
                    raise
                logger.debug(f"{paths.spool_b_dir} is on another filesystem, copying instead of renaming")
                _stage_into(paths.snapshot_file, paths.spool_b_file, context.nonce)
                paths.snapshot_file.unlink()
        except OSError as e:
            handle_file_error(
                error=e,
                context=f"move to {paths.spool_b_file}",
                reraise=False,
                log=logger,
            )
            return StepResult("move_spool_b", StepStatus.FAILED, error=str(e))

        logger.info(f"Moved {context.category.value} perfdata to {paths.spool_b_file}")
        return StepResult("move_spool_b", StepStatus.DONE, destination=paths.spool_b_file)

    def _remove_snapshot(self, context: RunContext) -> StepResult:
        snapshot_file = context.paths.snapshot_file
        if not snapshot_file.exists():
            return StepResult("cleanup", StepStatus.SKIPPED)

        try:
            snapshot_file.unlink()
        except FileNotFoundError:
            return StepResult("cleanup", StepStatus.SKIPPED)
        except OSError as e:
            handle_file_error(
                error=e,
                context=f"removal of {snapshot_file}",
                reraise=False,
                log=logger,
            )
            return StepResult("cleanup", StepStatus.FAILED, error=str(e))

        logger.info(f"Removed unconsumed snapshot {snapshot_file}")
        return StepResult("cleanup", StepStatus.DONE)


def route(category: Union[Category, str], timestamp: Union[int, str],
          config: Optional[RouterConfig] = None) -> RouteResult:
    """Route one event with a throwaway PerfdataRouter."""
    return PerfdataRouter(config=config).route(category, timestamp)


def _stage_into(source: Path, destination: Path, nonce: str) -> None:
    """
    Copy `source` to `destination` without ever exposing a partial file.

    The data is written to a hidden name next to the destination and renamed
    into place once complete; on failure the hidden file is removed.
    """
    staging_file = destination.with_name(f".{destination.name}.{nonce}")
    try:
        shutil.copy(source, staging_file)
        os.replace(staging_file, destination)
    except OSError:
        try:
            staging_file.unlink()
        except FileNotFoundError:
            pass
        except OSError as cleanup_error:
            logger.warning(f"Could not remove staging file {staging_file}: {cleanup_error}")
        raise
