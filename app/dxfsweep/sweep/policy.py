"""Retention policy for the DXF sweep.

The sweep has no configuration file. The defaults below describe the
job share and are validated once at startup; only the root can be
overridden (see ``dxfsweep.cli.main``).
"""

from datetime import timedelta
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dxfsweep.sweep.errors import PatternError, PolicyError
from dxfsweep.sweep.matching import NamePattern, SegmentPattern

ROOT_DIR = Path(r"\\hssieng\Jobs")
RETENTION_DAYS = 60
FOLDER_GLOB = "**/Fab/**/DXF"
FILE_GLOB = "*.dxf"
COMPANION_SUFFIX = ".log"


class RetentionPolicy(BaseModel):
    """What to sweep and how old it must be.

    Attributes:
        root: Directory tree to sweep.
        retention_days: Age cutoff used for traversal pruning.
        folder_glob: Root-relative pattern selecting DXF folders.
        file_glob: File name pattern selecting DXF files inside a folder.
        companion_suffix: Suffix of the paired log file.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Annotated[Path, Field(description="Root of the job tree")] = ROOT_DIR
    retention_days: Annotated[
        int,
        Field(ge=1, description="Retention window in days"),
    ] = RETENTION_DAYS
    folder_glob: Annotated[str, Field(description="DXF folder pattern")] = FOLDER_GLOB
    file_glob: Annotated[str, Field(description="DXF file name pattern")] = FILE_GLOB
    companion_suffix: Annotated[
        str,
        Field(pattern=r"^\.[^./\\]+$", description="Companion file suffix"),
    ] = COMPANION_SUFFIX

    @field_validator("folder_glob")
    @classmethod
    def validate_folder_glob(cls, v: str) -> str:
        try:
            SegmentPattern.compile(v)
        except PatternError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("file_glob")
    @classmethod
    def validate_file_glob(cls, v: str) -> str:
        try:
            NamePattern.compile(v)
        except PatternError as e:
            raise ValueError(str(e)) from e
        return v

    @property
    def threshold(self) -> timedelta:
        """Retention window as a timedelta."""
        return timedelta(days=self.retention_days)

    def folder_pattern(self) -> SegmentPattern:
        """Compile the DXF folder pattern."""
        return SegmentPattern.compile(self.folder_glob)

    def file_pattern(self) -> NamePattern:
        """Compile the DXF file name pattern."""
        return NamePattern.compile(self.file_glob)

    def is_recent(self, mtime: float, now: float) -> bool | None:
        """Check whether a modification time falls inside the retention window.

        Args:
            mtime: Modification time as a POSIX timestamp.
            now: Current time as a POSIX timestamp.

        Returns:
            True if modified less than ``retention_days`` ago, False if at
            least that old, None if the mtime lies in the future and the
            elapsed age is undefined.
        """
        elapsed = now - mtime
        if elapsed < 0:
            return None
        return elapsed < self.threshold.total_seconds()


def build_policy(**overrides: object) -> RetentionPolicy:
    """Construct and validate the retention policy.

    Args:
        **overrides: Field values replacing the defaults (e.g. ``root``).

    Returns:
        Validated RetentionPolicy.

    Raises:
        PolicyError: If any field is invalid, including malformed patterns.
    """
    try:
        return RetentionPolicy.model_validate(overrides)
    except ValidationError as e:
        msg = f"Invalid retention policy: {e}"
        raise PolicyError(msg) from e
