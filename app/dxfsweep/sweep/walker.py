"""Pruning traversal that locates DXF folders under Fab folders.

Walks the job tree with an explicit directory stack. Every directory is
checked against the retention window before it is listed, so recently
touched subtrees (active jobs) are never opened. Matched folders are
yielded lazily while the walk is in progress.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from dxfsweep.sweep.errors import SweepError
from dxfsweep.sweep.matching import SegmentPattern
from dxfsweep.sweep.models import PruneDecision
from dxfsweep.sweep.policy import RetentionPolicy

logger = logging.getLogger(__name__)


class DxfFolderWalker:
    """Yields directories matching the folder pattern below a root.

    Args:
        policy: Retention policy providing the root and age window.
        folder_pattern: Compiled root-relative folder pattern.
        now: POSIX timestamp used for every age decision in this walk.
    """

    def __init__(
        self,
        policy: RetentionPolicy,
        folder_pattern: SegmentPattern,
        now: float,
    ) -> None:
        self._policy = policy
        self._root = policy.root
        self._pattern = folder_pattern
        self._now = now

    def walk(self) -> Iterator[Path]:
        """Walk the tree and yield matching, non-pruned directories.

        The root itself is neither pruned nor matched. Directories other
        than the root that cannot be listed are logged and skipped.

        Yields:
            Paths of matched DXF folders, in sorted depth-first order.

        Raises:
            SweepError: If the root does not exist or cannot be listed.
        """
        if not self._root.is_dir():
            msg = f"Sweep root is not a readable directory: {self._root}"
            raise SweepError(msg)

        stack: list[tuple[Path, tuple[str, ...]]] = [(self._root, ())]

        while stack:
            directory, parts = stack.pop()
            try:
                entries = self._list(directory)
            except OSError as e:
                if directory == self._root:
                    msg = f"Cannot list sweep root {self._root}: {e}"
                    raise SweepError(msg) from e
                logger.warning("Cannot list directory %s: %s", directory, e)
                continue

            children: list[tuple[Path, tuple[str, ...]]] = []
            for entry in entries:
                if self.classify(entry) != PruneDecision.VISIT:
                    continue

                child = Path(entry.path)
                child_parts = (*parts, entry.name)
                if self._pattern.matches(child_parts):
                    yield child
                children.append((child, child_parts))

            stack.extend(reversed(children))

    def classify(self, entry: os.DirEntry[str]) -> PruneDecision:
        """Decide how the walk treats a single entry.

        Rules, in order:
        1. Non-directories (including symlinks) are skipped.
        2. Directories modified within the retention window are pruned.
        3. Everything else is visited, including directories whose
           modified time cannot be determined.

        Args:
            entry: Directory entry produced by ``os.scandir``.

        Returns:
            PruneDecision for the entry.
        """
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.warning("Cannot determine type of %s: %s", entry.path, e)
            return PruneDecision.SKIP_ENTRY

        if not is_dir:
            logger.debug("Skipping non-dir `%s`", entry.path)
            return PruneDecision.SKIP_ENTRY

        try:
            mtime = entry.stat(follow_symlinks=False).st_mtime
        except OSError as e:
            logger.warning("Cannot read modified time of %s: %s", entry.path, e)
            return PruneDecision.VISIT

        recent = self._policy.is_recent(mtime, self._now)
        if recent is None:
            logger.debug("Modified time of `%s` is in the future, visiting", entry.path)
            return PruneDecision.VISIT
        if recent:
            logger.debug(
                "Skipping entry `%s` (last modified less than %d days ago)",
                entry.path,
                self._policy.retention_days,
            )
            return PruneDecision.SKIP_TREE

        return PruneDecision.VISIT

    @staticmethod
    def _list(directory: Path) -> list[os.DirEntry[str]]:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)
