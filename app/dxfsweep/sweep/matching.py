"""Structural match patterns for DXF folders and DXF files.

Patterns are compiled once at startup into immutable values and handed
to the walker and operator explicitly. Matching is case-sensitive and
works on whole path segments:

- ``**`` matches zero or more segments
- any other segment uses ``fnmatch`` rules (``*``, ``?``, ``[...]``)
"""

from collections.abc import Iterable
from dataclasses import dataclass
from fnmatch import fnmatchcase

from dxfsweep.sweep.errors import PatternError

_RECURSIVE = "**"


def _split_glob(glob: str) -> tuple[str, ...]:
    """Split a glob into segments, rejecting malformed ones.

    Args:
        glob: Forward-slash separated glob (e.g. ``**/Fab/**/DXF``).

    Returns:
        Tuple of glob segments.

    Raises:
        PatternError: If the glob is empty, absolute, has empty segments,
            or mixes ``**`` with other characters inside one segment.
    """
    if not glob or not glob.strip():
        msg = "Pattern cannot be empty"
        raise PatternError(msg)
    if glob.startswith("/"):
        msg = f"Pattern must be relative: {glob!r}"
        raise PatternError(msg)

    segments = tuple(glob.split("/"))
    for segment in segments:
        if not segment:
            msg = f"Pattern has an empty segment: {glob!r}"
            raise PatternError(msg)
        if _RECURSIVE in segment and segment != _RECURSIVE:
            msg = f"'**' must be a whole segment in {glob!r}"
            raise PatternError(msg)
    return segments


@dataclass(frozen=True, slots=True)
class SegmentPattern:
    """Compiled multi-segment path pattern.

    Attributes:
        glob: Source glob text.
        segments: Parsed glob segments.
    """

    glob: str
    segments: tuple[str, ...]

    @classmethod
    def compile(cls, glob: str) -> "SegmentPattern":
        """Compile a glob such as ``**/Fab/**/DXF``.

        Raises:
            PatternError: If the glob is malformed.
        """
        segments = _split_glob(glob)
        if all(segment == _RECURSIVE for segment in segments):
            msg = f"Pattern must name at least one segment: {glob!r}"
            raise PatternError(msg)
        return cls(glob=glob, segments=segments)

    def matches(self, parts: Iterable[str]) -> bool:
        """Check whether a sequence of path segments matches the whole pattern.

        Args:
            parts: Path segments relative to the walk root.

        Returns:
            True if every segment is consumed by the pattern.
        """
        end = len(self.segments)
        states = self._expand({0})

        for part in parts:
            advanced: set[int] = set()
            for index in states:
                if index == end:
                    continue
                segment = self.segments[index]
                if segment == _RECURSIVE:
                    advanced.add(index)
                elif fnmatchcase(part, segment):
                    advanced.add(index + 1)
            states = self._expand(advanced)
            if not states:
                return False

        return end in states

    def _expand(self, states: set[int]) -> set[int]:
        """Add the positions reachable by letting ``**`` match nothing."""
        expanded = set(states)
        pending = list(states)
        while pending:
            index = pending.pop()
            if index < len(self.segments) and self.segments[index] == _RECURSIVE:
                following = index + 1
                if following not in expanded:
                    expanded.add(following)
                    pending.append(following)
        return expanded


@dataclass(frozen=True, slots=True)
class NamePattern:
    """Compiled single-segment file name pattern (e.g. ``*.dxf``)."""

    glob: str

    @classmethod
    def compile(cls, glob: str) -> "NamePattern":
        """Compile a file name glob.

        Raises:
            PatternError: If the glob spans more than one segment.
        """
        segments = _split_glob(glob)
        if len(segments) != 1 or segments[0] == _RECURSIVE:
            msg = f"File pattern must be a single name segment: {glob!r}"
            raise PatternError(msg)
        return cls(glob=glob)

    def matches(self, name: str) -> bool:
        """Check whether a file name matches the pattern."""
        return fnmatchcase(name, self.glob)
