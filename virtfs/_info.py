from __future__ import annotations

import io
import posixpath
from collections.abc import Iterator
from datetime import datetime
from typing import BinaryIO

from ._source import MIN_TIMESTAMP, VirtualFile


class VirtualFileInfo:
    """Immutable entry pairing a canonical path with its content source."""

    __slots__ = ("_path", "_name", "_source")

    def __init__(self, path: str, source: VirtualFile) -> None:
        self._path: str = path
        self._name: str = posixpath.basename(path)
        self._source: VirtualFile = source

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> VirtualFile:
        return self._source

    @property
    def exists(self) -> bool:
        return True

    @property
    def is_directory(self) -> bool:
        return False

    @property
    def length(self) -> int:
        return self._source.length

    @property
    def last_modified(self) -> datetime:
        return self._source.last_modified

    @property
    def physical_path(self) -> str | None:
        return None

    def create_read_stream(self) -> BinaryIO:
        return self._source.open_read_stream()

    def __repr__(self) -> str:
        return f"VirtualFileInfo(path={self._path!r}, source={self._source!r})"


class VirtualDirectoryInfo:
    """Directory inferred from a shared path prefix. Carries no content."""

    __slots__ = ("_name", "_exists")

    def __init__(self, name: str, exists: bool = True) -> None:
        self._name = name
        self._exists = exists

    @property
    def name(self) -> str:
        return self._name

    @property
    def exists(self) -> bool:
        return self._exists

    @property
    def is_directory(self) -> bool:
        return True

    @property
    def length(self) -> int:
        return -1

    @property
    def last_modified(self) -> datetime:
        return MIN_TIMESTAMP

    @property
    def physical_path(self) -> str | None:
        return None

    def create_read_stream(self) -> BinaryIO:
        raise io.UnsupportedOperation(
            f"Cannot open a read stream on virtual directory '{self._name}'."
        )

    def __repr__(self) -> str:
        return f"VirtualDirectoryInfo(name={self._name!r})"


class NotFoundFileInfo:
    """Returned by ``get_file_info`` for a path that is not in the store."""

    __slots__ = ("_name",)

    def __init__(self, path: str) -> None:
        self._name = path

    @property
    def name(self) -> str:
        return self._name

    @property
    def exists(self) -> bool:
        return False

    @property
    def is_directory(self) -> bool:
        return True

    @property
    def length(self) -> int:
        return 0

    @property
    def last_modified(self) -> datetime:
        return MIN_TIMESTAMP

    @property
    def physical_path(self) -> str | None:
        return None

    def create_read_stream(self) -> BinaryIO:
        raise io.UnsupportedOperation(f"No such file: '{self._name}'")

    def __repr__(self) -> str:
        return f"NotFoundFileInfo(name={self._name!r})"


FileEntry = VirtualFileInfo | VirtualDirectoryInfo


class DirectoryContents:
    __slots__ = ("_children",)

    def __init__(self, children: list[FileEntry]) -> None:
        self._children: tuple[FileEntry, ...] = tuple(children)

    @property
    def exists(self) -> bool:
        return len(self._children) > 0

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        names = [child.name for child in self._children]
        return f"DirectoryContents({names!r})"
