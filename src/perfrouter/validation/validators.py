"""
Validation functions for command-line values and configuration fields.
"""

import re
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar, Union

from .exceptions import ValidationError

E = TypeVar("E", bound=Enum)

_DIGITS_RE = re.compile(r"[0-9]+")


def validate_non_negative_integer(
    value: Any,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is a non-negative integer written in plain digits.

    Strings are accepted only when they consist of ASCII digits, so signs,
    whitespace, underscores and decimal points are all rejected.

    Args:
        value: Value to validate
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a non-negative integer, got {value!r}",
            field_name=field_name,
            value=value
        )

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str) and _DIGITS_RE.fullmatch(value):
        int_value = int(value)
    else:
        raise ValidationError(
            f"{field_name} must be a non-negative integer, got {value!r}",
            field_name=field_name,
            value=value
        )

    if int_value < 0:
        raise ValidationError(
            f"{field_name} must be >= 0, got {int_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and int_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    return int_value


def validate_enum_choice(
    value: Any,
    enum_type: Type[E],
    field_name: str = "value"
) -> E:
    """
    Validate that a value names exactly one member of an enum.

    Matching is case-sensitive against the member values.

    Raises:
        ValidationError: If the value is not one of the enum's values
    """
    for member in enum_type:
        if value == member.value:
            return member
    valid = [m.value for m in enum_type]
    raise ValidationError(
        f"{field_name} must be one of {valid}, got {value!r}",
        field_name=field_name,
        value=value
    )


def validate_absolute_path(
    path: Union[str, Path],
    field_name: str = "path"
) -> Path:
    """
    Validate that a value is a non-empty absolute filesystem path.

    The path does not have to exist; existence is checked at routing time.

    Raises:
        ValidationError: If the path is empty or relative
    """
    if path is None or str(path).strip() == "":
        raise ValidationError(
            f"{field_name} cannot be empty",
            field_name=field_name,
            value=path
        )
    path_obj = Path(path)
    if not path_obj.is_absolute():
        raise ValidationError(
            f"{field_name} must be an absolute path, got {path}",
            field_name=field_name,
            value=path
        )
    return path_obj


def validate_distinct_paths(paths: List[Path], field_name: str = "paths") -> None:
    """Raise ValidationError if any two paths are the same."""
    seen = set()
    for path in paths:
        if path in seen:
            raise ValidationError(
                f"{field_name} must not repeat a path, got {path} twice",
                field_name=field_name,
                value=[str(p) for p in paths]
            )
        seen.add(path)
