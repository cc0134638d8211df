from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Any, BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class FileInfo(Protocol):
    """What a host expects to know about a single file or directory."""

    @property
    def exists(self) -> bool: ...

    @property
    def is_directory(self) -> bool: ...

    @property
    def length(self) -> int: ...

    @property
    def last_modified(self) -> datetime: ...

    @property
    def name(self) -> str: ...

    @property
    def physical_path(self) -> str | None: ...

    def create_read_stream(self) -> BinaryIO: ...


@runtime_checkable
class ChangeTokenLike(Protocol):
    @property
    def has_changed(self) -> bool: ...

    @property
    def active_change_callbacks(self) -> bool: ...

    def register_callback(
        self, callback: Callable[[Any], object], state: Any = None
    ) -> Any: ...


@runtime_checkable
class DirectoryContentsLike(Protocol):
    @property
    def exists(self) -> bool: ...

    def __iter__(self) -> Iterator[FileInfo]: ...


@runtime_checkable
class FileProvider(Protocol):
    def get_file_info(self, subpath: str) -> FileInfo: ...

    def get_directory_contents(self, subpath: str) -> DirectoryContentsLike: ...

    def watch(self, pattern: str) -> ChangeTokenLike: ...
