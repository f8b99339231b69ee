"""
Command-line interface for the perfrouter package.
"""

from .main import main_cli, parse_arguments, setup_logging

__all__ = [
    "main_cli",
    "parse_arguments",
    "setup_logging",
]
