"""
perfrouter: hand monitoring perfdata over to whichever spool directories exist.

A monitoring host appends host and service performance data to two live
files. On every processing cycle this package snapshots the live file and
delivers it to the Nagflux spool (by copy) and the PNP spool (by move), each
only if its directory exists, then removes whatever is left.

The package is organized into specialized modules:
- config: Router configuration and validation
- models: Data structures and type definitions
- validation: Input validation and error handling
- routing: Snapshot, fan-out and cleanup of perfdata files
- cli: Command-line interface

Usage:
    From command line:
        move-perfdata -c host -t 1543412003

    Programmatically:
        from perfrouter import PerfdataRouter, RouterConfig
        router = PerfdataRouter(RouterConfig(live_base_dir=Path("/srv/var")))
        result = router.route("host", 1543412003)
"""

# Main interfaces
from .config import clear_config_cache, get_config, set_config
from .routing import PerfdataRouter, route
from .cli import main_cli

# Model classes for external use
from .models import (
    Category,
    ExitStatus,
    RouteResult,
    RouterConfig,
    RunContext,
    RunPaths,
    StepResult,
    StepStatus,
)

# Validation utilities
from .validation import UsageError, ValidationError

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "set_config",
    "clear_config_cache",
    "PerfdataRouter",
    "route",
    "main_cli",
    # Models
    "Category",
    "ExitStatus",
    "RouteResult",
    "RouterConfig",
    "RunContext",
    "RunPaths",
    "StepResult",
    "StepStatus",
    # Validation
    "UsageError",
    "ValidationError",
]
