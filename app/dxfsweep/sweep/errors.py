"""Exceptions raised by the retention sweep.

Only startup and root-level failures are raised. Per-entry and per-file
problems are logged and absorbed where they happen.
"""


class DxfSweepError(Exception):
    """Base exception for dxfsweep errors."""


class PolicyError(DxfSweepError):
    """Raised when the retention policy cannot be constructed."""


class PatternError(PolicyError):
    """Raised when a structural match pattern is invalid."""


class SweepError(DxfSweepError):
    """Raised when the sweep root cannot be read."""
