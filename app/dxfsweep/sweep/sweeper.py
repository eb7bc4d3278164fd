"""Retention sweep driver.

Connects the folder walker and the pair operator and aggregates their
results into a single run summary.
"""

import logging
import time

from dxfsweep.sweep.models import SweepSummary
from dxfsweep.sweep.operator import DxfPairOperator
from dxfsweep.sweep.policy import RetentionPolicy
from dxfsweep.sweep.walker import DxfFolderWalker

logger = logging.getLogger(__name__)


class RetentionSweeper:
    """Runs one retention sweep over the job tree.

    Both patterns are compiled here, once, and passed to the walker and
    operator.

    Args:
        policy: Validated retention policy.
        now: POSIX timestamp for age decisions. Defaults to the time the
            run starts.
    """

    def __init__(self, policy: RetentionPolicy, now: float | None = None) -> None:
        self._policy = policy
        self._now = now
        self._folder_pattern = policy.folder_pattern()
        self._operator = DxfPairOperator(policy.file_pattern(), policy.companion_suffix)

    def run(self) -> SweepSummary:
        """Sweep the tree and delete eligible DXF/log pairs.

        Returns:
            SweepSummary for the run.

        Raises:
            SweepError: If the root cannot be read. Deletions made before
                the failure are not rolled back.
        """
        now = self._now if self._now is not None else time.time()
        walker = DxfFolderWalker(self._policy, self._folder_pattern, now)

        summary = SweepSummary()
        for directory in walker.walk():
            result = self._operator.remove_all(directory)
            logger.debug(
                "Folder %s: %d of %d pairs deleted",
                result.directory,
                result.deleted,
                result.attempted,
            )
            summary = summary.add(result)

        logger.info("Deleted %d dxf files", summary.deleted)
        return summary
