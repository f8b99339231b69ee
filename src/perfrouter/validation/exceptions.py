"""
Error types and reporting helpers.

Every problem the router runs into ends up as a single log line. The helpers
here keep the wording of those lines uniform: ``Error in <context>: <error>``
for filesystem and configuration problems, and the bare usage message for
command-line mistakes.
"""

import logging
import sys
from typing import Any, NoReturn, Optional

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """
    Raised when an argument or configuration value is rejected.

    Attributes:
        field_name: Name of the offending option or setting
        value: The rejected value
    """

    def __init__(self, message: str, field_name: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field_name = field_name
        self.value = value


class UsageError(ValidationError):
    """
    Raised when the command line is malformed or carries invalid values.

    Messages flagged with ``exiting`` announce the termination explicitly,
    e.g. "The value for -c must be 'service' or 'host'. Exiting."; the
    terse ones ("Invalid: -x", "-t missing argument.") do not.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, exiting: bool = False):
        super().__init__(message, field_name=field_name, value=value)
        self.exiting = exiting

    @property
    def report(self) -> str:
        """The line shown to the operator."""
        if self.exiting:
            return f"{self} Exiting."
        return str(self)


def handle_error(
    error: Exception,
    context: str,
    reraise: bool = True,
    log: Optional[logging.Logger] = None
) -> None:
    """
    Log an error as ``Error in <context>: <error>`` and optionally re-raise it.

    Args:
        error: The exception that occurred
        context: Where the error occurred, e.g. "file copy to /spool/x"
        reraise: Whether to re-raise the exception after logging
        log: Logger to report through, defaults to this module's logger
    """
    (log or logger).error(f"Error in {context}: {error}")
    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_file_error(error: Exception, context: str, **kwargs) -> None:
    """Handle file-related errors."""
    handle_error(error, f"file {context}", **kwargs)


def handle_cli_error(
    error: Exception,
    context: str,
    exit_code: int = 1,
    log: Optional[logging.Logger] = None
) -> NoReturn:
    """
    Report a CLI error and terminate the process with `exit_code`.

    Usage errors are reported with their own message only; anything else
    carries the usual context prefix.
    """
    if isinstance(error, UsageError):
        (log or logger).error(error.report)
    else:
        handle_error(error, f"CLI {context}", reraise=False, log=log)
    sys.exit(exit_code)
