"""DXF file scanning and paired deletion.

Within a matched DXF folder every DXF file is a candidate, at any depth
and regardless of its own age. Each candidate is removed together with
its companion log file. The companion is not checked beforehand: a DXF
without a log is still removed, but the pair is not counted.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from dxfsweep.sweep.matching import NamePattern
from dxfsweep.sweep.models import FolderResult, PairDeletionResult

logger = logging.getLogger(__name__)


class DxfPairOperator:
    """Scans DXF folders and deletes DXF/log pairs.

    Args:
        file_pattern: Compiled DXF file name pattern.
        companion_suffix: Suffix of the paired log file (e.g. ``.log``).
    """

    def __init__(self, file_pattern: NamePattern, companion_suffix: str) -> None:
        self._pattern = file_pattern
        self._companion_suffix = companion_suffix

    def scan(self, directory: Path) -> Iterator[Path]:
        """Yield DXF files at any depth below a directory.

        Each directory is listed completely before its files are yielded,
        so deletions by the caller do not disturb an open listing.

        Args:
            directory: Matched DXF folder.

        Yields:
            Paths of files whose name matches the file pattern.
        """
        stack = [directory]

        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as it:
                    entries = sorted(it, key=lambda entry: entry.name)
            except OSError as e:
                logger.warning("Cannot list directory %s: %s", current, e)
                continue

            subdirs: list[Path] = []
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append(Path(entry.path))
                        continue
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError as e:
                    logger.warning("Cannot determine type of %s: %s", entry.path, e)
                    continue

                if is_file and self._pattern.matches(entry.name):
                    yield Path(entry.path)

            stack.extend(reversed(subdirs))

    def remove_pair(self, path: Path) -> PairDeletionResult:
        """Delete a DXF file, then its companion log file.

        The DXF is not restored if the companion cannot be deleted.

        Args:
            path: DXF file to delete.

        Returns:
            PairDeletionResult, successful only if both files were removed.
        """
        logger.debug("Removing .dxf/%s file %s", self._companion_suffix, path)

        try:
            path.unlink()
        except OSError as e:
            logger.warning("Failed to remove %s: %s", path, e)
            return PairDeletionResult(path=str(path), success=False, error=str(e))

        companion = path.with_suffix(self._companion_suffix)
        try:
            companion.unlink()
        except OSError as e:
            logger.warning("Removed %s but not its companion %s: %s", path, companion, e)
            return PairDeletionResult(
                path=str(path),
                success=False,
                dxf_removed=True,
                error=str(e),
            )

        return PairDeletionResult(path=str(path), success=True, dxf_removed=True)

    def remove_all(self, directory: Path) -> FolderResult:
        """Delete every DXF/log pair found below a DXF folder.

        Args:
            directory: Matched DXF folder.

        Returns:
            FolderResult with attempted and fully deleted counts.
        """
        logger.debug("Walking directory %s", directory)

        attempted = 0
        deleted = 0
        for path in self.scan(directory):
            attempted += 1
            if self.remove_pair(path).success:
                deleted += 1

        return FolderResult(directory=str(directory), attempted=attempted, deleted=deleted)
