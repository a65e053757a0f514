"""Utility modules for flacman.

This module exports commonly used utility functions.
"""

from flacman.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from flacman.utils.log import setup_logging

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "setup_logging",
]
