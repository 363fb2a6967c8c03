"""Utility modules for recsort.

This module exports commonly used utility functions.
"""

from recsort.utils.formatting import (
    console,
    err_console,
    format_size,
    print_error,
    print_header,
    print_warning,
)
from recsort.utils.log import setup_logging

__all__ = [
    "console",
    "err_console",
    "format_size",
    "print_error",
    "print_header",
    "print_warning",
    "setup_logging",
]
