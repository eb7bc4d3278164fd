"""Sweep domain models.

Results are transient and scoped to a single run; nothing here is
persisted between sweeps.
"""

from dataclasses import dataclass
from enum import Enum


class PruneDecision(str, Enum):
    """Traversal decision for a single directory entry.

    Attributes:
        VISIT: Match the entry and descend into it.
        SKIP_ENTRY: Do not match the entry (non-directories).
        SKIP_TREE: Neither match the entry nor descend into it.
    """

    VISIT = "visit"
    SKIP_ENTRY = "skip_entry"
    SKIP_TREE = "skip_tree"


@dataclass(frozen=True, slots=True)
class PairDeletionResult:
    """Outcome of deleting one DXF file and its companion log.

    Attributes:
        path: Path of the DXF file.
        success: True only if both files were removed.
        dxf_removed: Whether the DXF file itself was removed.
        error: Error message for the failing removal, None on success.
    """

    path: str
    success: bool
    dxf_removed: bool = False
    error: str | None = None


@dataclass(frozen=True, slots=True)
class FolderResult:
    """Paired deletions performed under one matched DXF folder.

    Attributes:
        directory: The matched folder.
        attempted: Number of DXF files found and attempted.
        deleted: Number of fully successful pairs.
    """

    directory: str
    attempted: int
    deleted: int


@dataclass(frozen=True, slots=True)
class SweepSummary:
    """Aggregate result of one sweep run.

    Attributes:
        folders: Number of DXF folders matched.
        attempted: Number of DXF files attempted.
        deleted: Number of fully successful pairs.
    """

    folders: int = 0
    attempted: int = 0
    deleted: int = 0

    def add(self, result: FolderResult) -> "SweepSummary":
        """Return a new summary including one folder's result."""
        return SweepSummary(
            folders=self.folders + 1,
            attempted=self.attempted + result.attempted,
            deleted=self.deleted + result.deleted,
        )
