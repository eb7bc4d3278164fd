"""Rich console formatting utilities.

Provides consistent operator-facing output and logging setup using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOGGER_NAME = "dxfsweep"

_THEME = Theme(
    {
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the operator terminal.

    Returns "truecolor" when stderr is interactive to enable full hex color
    support, None otherwise to let Rich auto-detect.
    """
    if sys.stderr.isatty():
        return "truecolor"
    return None


# Shared stderr console for log records and errors
err_console = Console(theme=_THEME, stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False) -> None:
    """Route dxfsweep log records to stderr through Rich.

    Safe to call more than once; the previous Rich handler is replaced.

    Args:
        verbose: If True, log at DEBUG level (per-entry detail), else INFO.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)

    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")
