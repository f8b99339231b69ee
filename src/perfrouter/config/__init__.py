"""
Configuration management for the perfrouter package.

This module provides access to the router configuration with singleton
pattern management and validation of injected settings.
"""

# Main configuration interface
from .manager import (
    clear_config_cache,
    get_config,
    get_config_info,
    is_config_loaded,
    set_config,
)
from .validators import validate_router_config

__all__ = [
    # Main interface
    "get_config",
    "set_config",
    "clear_config_cache",
    "is_config_loaded",
    "get_config_info",
    # Advanced interface
    "validate_router_config",
]
