"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules. Job trees are
built under ``tmp_path`` and aged with ``os.utime`` relative to a fixed
``now`` timestamp that tests pass to the sweep.
"""

import os
import time
from collections.abc import Callable
from pathlib import Path

import pytest

DAY = 24 * 60 * 60
DEFAULT_AGE_DAYS = 90


@pytest.fixture
def now() -> float:
    """Clock reading shared by the tree builder and the sweep under test."""
    return time.time()


@pytest.fixture
def set_age(now: float) -> Callable[[Path, float], None]:
    """Set a path's access and modification time to ``days`` before ``now``."""

    def _set_age(path: Path, days: float) -> None:
        stamp = now - days * DAY
        os.utime(path, (stamp, stamp))

    return _set_age


@pytest.fixture
def build_tree(
    tmp_path: Path, set_age: Callable[[Path, float], None]
) -> Callable[..., Path]:
    """Build a job tree and return its root.

    Files are given as ``{relative_path: age_days}``. Every directory below
    the root is aged ``DEFAULT_AGE_DAYS`` unless listed in ``dir_ages``.
    The root itself keeps its fresh modification time.
    """

    def _build(
        files: dict[str, float],
        dir_ages: dict[str, float] | None = None,
    ) -> Path:
        root = tmp_path / "Jobs"
        root.mkdir()
        dir_ages = dir_ages or {}

        for rel in files:
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("0\nSECTION\n")
        for rel in dir_ages:
            (root / rel).mkdir(parents=True, exist_ok=True)

        for path in root.rglob("*"):
            if path.is_dir():
                set_age(path, DEFAULT_AGE_DAYS)
        for rel, age in files.items():
            set_age(root / rel, age)
        for rel, age in dir_ages.items():
            set_age(root / rel, age)

        return root

    return _build
