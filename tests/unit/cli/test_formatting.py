"""Tests for Rich console and logging helpers."""

import logging

from dxfsweep.utils.formatting import configure_logging
from rich.logging import RichHandler


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_single_rich_handler(self) -> None:
        """Repeated calls keep exactly one Rich handler on the package logger."""
        configure_logging()
        configure_logging()

        logger = logging.getLogger("dxfsweep")
        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1

    def test_levels(self) -> None:
        """Default level is INFO; verbose is DEBUG."""
        configure_logging()
        assert logging.getLogger("dxfsweep").level == logging.INFO

        configure_logging(verbose=True)
        assert logging.getLogger("dxfsweep").level == logging.DEBUG
