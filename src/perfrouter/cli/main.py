"""
Command-line interface for the perfdata router.

Meant to be the command_line of the monitoring host's perfdata processing
commands, one per category:

    define command{
        command_name process-host-perfdata
        command_line /usr/bin/move-perfdata -c host -t $TIMET$
    }

    define command{
        command_name process-service-perfdata
        command_line /usr/bin/move-perfdata -c service -t $TIMET$
    }

Usage:
    move-perfdata -c [host|service] -t TIMESTAMP
    python -m perfrouter.cli.main -c host -t 1543412003
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from ..models.config import RouterConfig
from ..models.results import ExitStatus
from ..models.runtime import Category
from ..routing import PerfdataRouter
from ..validation import (
    UsageError,
    ValidationError,
    handle_cli_error,
    validate_enum_choice,
    validate_non_negative_integer,
)

# --- Logging Setup ---
LOG_FORMAT = "[%(asctime)s]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
DEBUG_ENV_VAR = "PERFROUTER_DEBUG"

logger = logging.getLogger(__name__)

NO_ARGUMENTS_MESSAGE = (
    "No arguments given: please use both -c [host|service] and -t [timestamp]."
)


def setup_logging(stream=None) -> None:
    """
    Send log records to stderr as ``[2025-01-02T03:04:05+0000]: message``.

    Does nothing if the root logger is already configured.
    """
    level = logging.DEBUG if os.environ.get(DEBUG_ENV_VAR) else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=stream or sys.stderr,
    )


class _UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of printing and exiting."""

    def error(self, message):
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _UsageErrorParser(
        prog="move-perfdata",
        description="Hand host or service perfdata over to the spool directories present on this system.",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("-c", dest="category", metavar="host|service")
    parser.add_argument("-t", dest="timestamp", metavar="TIMESTAMP")
    return parser


def parse_arguments(argv: List[str]) -> Tuple[Category, int]:
    """
    Parse and validate the command line.

    Args:
        argv: Arguments without the program name

    Returns:
        The category and the event timestamp

    Raises:
        UsageError: On any malformed or invalid input
    """
    if not argv or len(argv[0]) < 2 or not argv[0].startswith("-"):
        raise UsageError(NO_ARGUMENTS_MESSAGE, exiting=True)

    parser = _build_parser()
    try:
        args, extras = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        # The only per-argument failure our two store options can produce.
        raise UsageError(f"{e.argument_name} missing argument.", field_name=e.argument_name) from e

    if extras:
        extra = extras[0]
        if extra.startswith("-"):
            raise UsageError(f"Invalid: {extra}", value=extra)
        raise UsageError(f"Unexpected argument: {extra}", value=extra)

    if args.category is None:
        raise UsageError("Missing required option -c [host|service].", field_name="-c")
    if args.timestamp is None:
        raise UsageError("Missing required option -t [timestamp].", field_name="-t")

    try:
        category = validate_enum_choice(args.category, Category, field_name="-c")
    except ValidationError as e:
        raise UsageError(
            "The value for -c must be 'service' or 'host'.", field_name="-c", value=args.category,
            exiting=True,
        ) from e

    try:
        timestamp = validate_non_negative_integer(args.timestamp, field_name="-t")
    except ValidationError as e:
        raise UsageError(
            "The value you supplied for timestamp -t isn't a number.", field_name="-t", value=args.timestamp,
            exiting=True,
        ) from e

    return category, timestamp


def main_cli(argv: Optional[List[str]] = None, config: Optional[RouterConfig] = None) -> None:
    """
    Entry point of the `move-perfdata` command.

    Exits with status 1 on usage errors, and with status 2 if a filesystem
    step failed. Returns normally on success.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]
        config: Filesystem locations, defaults to the process configuration
    """
    setup_logging()

    if argv is None:
        argv = sys.argv[1:]

    try:
        category, timestamp = parse_arguments(argv)
    except UsageError as e:
        handle_cli_error(
            error=e,
            context="argument parsing",
            exit_code=ExitStatus.USAGE_ERROR,
            log=logger,
        )

    router = PerfdataRouter(config=config)
    result = router.route(category, timestamp)

    status = result.exit_status
    if status is not ExitStatus.SUCCESS:
        failed = ", ".join(step.step for step in result.steps if step.failed)
        logger.error(f"Routing {category.value} perfdata for {timestamp} finished with failed steps: {failed}")
        sys.exit(int(status))


if __name__ == "__main__":
    main_cli()
