"""
Data models for the routing system.

Configuration Models:
- Filesystem locations of the live perfdata files and spool directories

Runtime Models:
- Perfdata category and per-run paths and context

Result Models:
- Per-step outcomes, the overall run outcome and process exit codes
"""

# Configuration models
from .config import (
    DEFAULT_LIVE_BASE_DIR,
    DEFAULT_SPOOL_A_DIR,
    DEFAULT_SPOOL_B_DIR,
    RouterConfig,
)

# Runtime models
from .runtime import Category, RunContext, RunPaths

# Result models
from .results import ExitStatus, RouteResult, StepResult, StepStatus

__all__ = [
    # Configuration
    "DEFAULT_LIVE_BASE_DIR",
    "DEFAULT_SPOOL_A_DIR",
    "DEFAULT_SPOOL_B_DIR",
    "RouterConfig",
    # Runtime
    "Category",
    "RunContext",
    "RunPaths",
    # Results
    "ExitStatus",
    "RouteResult",
    "StepResult",
    "StepStatus",
]
