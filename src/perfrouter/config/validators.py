"""
Configuration validation.

This module turns a plain mapping of settings into a validated RouterConfig,
filling in the historical default for every field that is not given.
"""

import logging
from typing import Any, Dict, Optional

from ..models.config import (
    DEFAULT_LIVE_BASE_DIR,
    DEFAULT_SPOOL_A_DIR,
    DEFAULT_SPOOL_B_DIR,
    RouterConfig,
)
from ..validation import ValidationError, validate_absolute_path, validate_distinct_paths

logger = logging.getLogger(__name__)

_KNOWN_FIELDS = ("live_base_dir", "spool_a_dir", "spool_b_dir")


def validate_router_config(data: Optional[Dict[str, Any]] = None) -> RouterConfig:
    """
    Validate router settings and build a RouterConfig.

    Args:
        data: Mapping with any of `live_base_dir`, `spool_a_dir`,
            `spool_b_dir`. Missing keys use the historical defaults.

    Returns:
        Validated RouterConfig instance

    Raises:
        ValidationError: If a path is empty, relative, repeated, or an
            unknown key is present
    """
    data = dict(data or {})

    unknown = sorted(set(data) - set(_KNOWN_FIELDS))
    if unknown:
        raise ValidationError(
            f"Unknown router settings: {', '.join(unknown)}",
            field_name="router",
            value=unknown,
        )

    live_base_dir = validate_absolute_path(
        data.get("live_base_dir", DEFAULT_LIVE_BASE_DIR), field_name="live_base_dir"
    )
    spool_a_dir = validate_absolute_path(
        data.get("spool_a_dir", DEFAULT_SPOOL_A_DIR), field_name="spool_a_dir"
    )
    spool_b_dir = validate_absolute_path(
        data.get("spool_b_dir", DEFAULT_SPOOL_B_DIR), field_name="spool_b_dir"
    )

    # Both spools receive a file with the same name; sharing a directory would
    # make the move overwrite the copy.
    validate_distinct_paths([spool_a_dir, spool_b_dir], field_name="spool directories")

    if live_base_dir in (spool_a_dir, spool_b_dir):
        logger.warning(
            f"live_base_dir {live_base_dir} doubles as a spool directory; "
            "snapshots will be visible to the spool consumer"
        )

    return RouterConfig(
        live_base_dir=live_base_dir,
        spool_a_dir=spool_a_dir,
        spool_b_dir=spool_b_dir,
    )
