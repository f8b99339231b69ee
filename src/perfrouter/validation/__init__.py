"""
Validation and error handling for the perfrouter package.

This module provides input validation and error handling with consistent
error reporting across the application.
"""

# Core exception classes and error handling
from .exceptions import (
    UsageError,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_file_error,
    handle_cli_error,
)

# Validation functions
from .validators import (
    validate_absolute_path,
    validate_distinct_paths,
    validate_enum_choice,
    validate_non_negative_integer,
)

__all__ = [
    # Core functionality
    "UsageError",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_file_error",
    "handle_cli_error",
    # Validators
    "validate_absolute_path",
    "validate_distinct_paths",
    "validate_enum_choice",
    "validate_non_negative_integer",
]
