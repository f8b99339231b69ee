"""
Configuration management and singleton pattern.

There is no configuration file: the router works from the historical paths
unless a caller injects its own RouterConfig before the first run.
"""

import logging
from typing import Any, Dict, Optional

from ..models.config import RouterConfig
from ..validation import handle_config_error
from .validators import validate_router_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

# Holds the single RouterConfig instance in use by this process.
_CONFIG: Optional[RouterConfig] = None


def set_config(config: Optional[RouterConfig] = None, **overrides: Any) -> RouterConfig:
    """
    Install a configuration for subsequent get_config() calls.

    Either pass a ready RouterConfig, or keyword overrides that are validated
    on top of the defaults, e.g. ``set_config(live_base_dir="/srv/var")``.

    Returns:
        The installed configuration

    Raises:
        ValidationError: If the overrides are invalid
    """
    global _CONFIG
    if config is None:
        try:
            config = validate_router_config(overrides)
        except Exception as e:
            handle_config_error(
                error=e,
                context="validating router settings",
                reraise=True,
                log=logger
            )
    elif overrides:
        raise TypeError("set_config() takes either a RouterConfig or keyword overrides, not both")
    _CONFIG = config
    logger.debug(f"Router configuration set: {config.to_dict()}")
    return config


def clear_config_cache() -> None:
    """
    Clear the cached configuration, so the next access rebuilds the defaults.
    """
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def get_config() -> RouterConfig:
    """
    Get the process-wide router configuration, creating the default if needed.

    Returns:
        The singleton RouterConfig instance
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = validate_router_config()
    return _CONFIG


def is_config_loaded() -> bool:
    """
    Check if a configuration has been created or injected.
    """
    return _CONFIG is not None


def get_config_info() -> Dict[str, Any]:
    """
    Get information about the current configuration state.

    Returns:
        Dictionary with configuration metadata
    """
    info: Dict[str, Any] = {"config_loaded": is_config_loaded()}
    if _CONFIG is not None:
        info.update(_CONFIG.to_dict())
    return info
