from __future__ import annotations

from collections.abc import Iterable

from ._info import FileEntry, VirtualDirectoryInfo, VirtualFileInfo
from ._path import split_path


def synthesize_directory(
    dir_path: str,
    entries: Iterable[VirtualFileInfo],
    case_sensitive: bool = True,
) -> list[FileEntry]:
    """Build the one-level listing of *dir_path* from a flat set of entries.

    *entries* is expected to be sorted already; the output keeps that order.
    An entry directly inside *dir_path* is emitted as-is.  An entry further
    down collapses into a :class:`VirtualDirectoryInfo` named after its first
    segment below *dir_path*, emitted once per distinct directory.
    """
    def fold(name: str) -> str:
        return name if case_sensitive else name.lower()

    prefix = [fold(p) for p in split_path(dir_path)]
    depth = len(prefix)
    children: list[FileEntry] = []
    seen_dirs: set[str] = set()

    for entry in entries:
        parts = split_path(entry.path)
        if len(parts) <= depth:
            continue
        if [fold(p) for p in parts[:depth]] != prefix:
            continue
        remainder = parts[depth:]
        if len(remainder) == 1:
            children.append(entry)
            continue
        dir_key = "/".join(prefix + [fold(remainder[0])])
        if dir_key in seen_dirs:
            continue
        seen_dirs.add(dir_key)
        children.append(VirtualDirectoryInfo(remainder[0]))

    return children
