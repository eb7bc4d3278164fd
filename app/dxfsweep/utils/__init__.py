"""Utility modules for dxfsweep.

This module exports commonly used utility functions.
"""

from dxfsweep.utils.formatting import configure_logging, err_console, print_error

__all__ = [
    "configure_logging",
    "err_console",
    "print_error",
]
