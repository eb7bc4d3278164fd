"""Tests for sweep domain models."""

import pytest
from dxfsweep.sweep.models import FolderResult, PairDeletionResult, PruneDecision, SweepSummary


class TestPruneDecision:
    """Tests for PruneDecision enum."""

    def test_prune_decision_values(self) -> None:
        """Verify all 3 PruneDecision values exist with correct string values."""
        assert PruneDecision.VISIT == "visit"
        assert PruneDecision.SKIP_ENTRY == "skip_entry"
        assert PruneDecision.SKIP_TREE == "skip_tree"
        assert len(PruneDecision) == 3


class TestPairDeletionResult:
    """Tests for PairDeletionResult."""

    def test_defaults(self) -> None:
        """A failed result defaults to nothing removed and no error text."""
        result = PairDeletionResult(path="/jobs/a.dxf", success=False)

        assert result.dxf_removed is False
        assert result.error is None

    def test_is_frozen(self) -> None:
        """Results are immutable."""
        result = PairDeletionResult(path="/jobs/a.dxf", success=True, dxf_removed=True)

        with pytest.raises(AttributeError):
            result.success = False  # type: ignore[misc]


class TestSweepSummary:
    """Tests for SweepSummary aggregation."""

    def test_add_accumulates_folder_results(self) -> None:
        """Adding folder results sums counts and counts folders."""
        summary = SweepSummary()
        summary = summary.add(FolderResult(directory="/jobs/A/Fab/DXF", attempted=3, deleted=2))
        summary = summary.add(FolderResult(directory="/jobs/B/Fab/DXF", attempted=1, deleted=0))

        assert summary == SweepSummary(folders=2, attempted=4, deleted=2)

    def test_add_returns_new_instance(self) -> None:
        """The original summary is left unchanged."""
        empty = SweepSummary()

        empty.add(FolderResult(directory="/jobs/A/Fab/DXF", attempted=1, deleted=1))

        assert empty.deleted == 0
