"""DXF retention sweep.

This module provides the retention policy, structural match patterns,
the pruning folder walker, and the paired DXF/log deletion operator.
"""

from dxfsweep.sweep.errors import DxfSweepError, PatternError, PolicyError, SweepError
from dxfsweep.sweep.matching import NamePattern, SegmentPattern
from dxfsweep.sweep.models import FolderResult, PairDeletionResult, PruneDecision, SweepSummary
from dxfsweep.sweep.operator import DxfPairOperator
from dxfsweep.sweep.policy import RetentionPolicy, build_policy
from dxfsweep.sweep.sweeper import RetentionSweeper
from dxfsweep.sweep.walker import DxfFolderWalker

__all__ = [
    "DxfFolderWalker",
    "DxfPairOperator",
    "DxfSweepError",
    "FolderResult",
    "NamePattern",
    "PairDeletionResult",
    "PatternError",
    "PolicyError",
    "PruneDecision",
    "RetentionPolicy",
    "RetentionSweeper",
    "SegmentPattern",
    "SweepError",
    "SweepSummary",
    "build_policy",
]
