"""CLI package for dxfsweep.

This package contains the Typer application.
"""

from dxfsweep.cli.main import app

__all__ = ["app"]
