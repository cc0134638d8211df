from __future__ import annotations

import fnmatch
from collections.abc import Iterable

from ._path import split_path


class GlobMatcher:
    """Single-include glob pattern matched against root-relative paths.

    Supports ``*``, ``?`` and ``[seq]`` inside one path segment, and ``**``
    as a whole segment matching zero or more segments.  Leading separators
    on both the pattern and the candidate paths are ignored.
    """

    __slots__ = ("pattern", "case_sensitive", "_parts")

    def __init__(self, pattern: str, case_sensitive: bool = True) -> None:
        self.pattern = pattern
        self.case_sensitive = case_sensitive
        self._parts: list[str] = self._fold(split_path(pattern))

    def _fold(self, parts: list[str]) -> list[str]:
        if self.case_sensitive:
            return parts
        return [p.lower() for p in parts]

    def match(self, path: str) -> bool:
        if not self._parts:
            return False
        return self._match(self._fold(split_path(path)), 0, 0)

    def match_any(self, paths: Iterable[str]) -> bool:
        return any(self.match(path) for path in paths)

    def _match(self, names: list[str], pidx: int, nidx: int) -> bool:
        parts = self._parts
        while pidx < len(parts):
            part = parts[pidx]
            if part == "**":
                # Collapse consecutive ** segments
                while pidx + 1 < len(parts) and parts[pidx + 1] == "**":
                    pidx += 1
                if pidx + 1 == len(parts):
                    return nidx < len(names)
                return any(
                    self._match(names, pidx + 1, start)
                    for start in range(nidx, len(names))
                )
            if nidx >= len(names):
                return False
            if not fnmatch.fnmatchcase(names[nidx], part):
                return False
            pidx += 1
            nidx += 1
        return nidx == len(names)
