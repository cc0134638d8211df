from __future__ import annotations

import io
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import BinaryIO

MIN_TIMESTAMP: datetime = datetime.min.replace(tzinfo=timezone.utc)


class VirtualFile(ABC):
    """Abstract content source for an entry in a :class:`VirtualFileStore`.

    Implementations supply the byte length, the modification time and a way
    to open a fresh stream over the content.  Equality (``__eq__``) is used
    by the store only to decide whether an ``add`` actually changes anything,
    so subclasses that can be regenerated should compare by value.
    """

    @property
    @abstractmethod
    def length(self) -> int: ...

    @property
    @abstractmethod
    def last_modified(self) -> datetime: ...

    @abstractmethod
    def open_read_stream(self) -> BinaryIO:
        """Return a new, independent readable binary stream."""
        ...


class BytesVirtualFile(VirtualFile):
    __slots__ = ("_data", "_last_modified")

    def __init__(self, data: bytes, last_modified: datetime | None = None) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"BytesVirtualFile expects bytes-like data, got {type(data).__name__}."
            )
        self._data: bytes = bytes(data)
        self._last_modified: datetime = (
            last_modified
            if last_modified is not None
            else datetime.now(timezone.utc)
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        encoding: str = "utf-8",
        last_modified: datetime | None = None,
    ) -> BytesVirtualFile:
        return cls(text.encode(encoding), last_modified)

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def last_modified(self) -> datetime:
        return self._last_modified

    def open_read_stream(self) -> BinaryIO:
        return io.BytesIO(self._data)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BytesVirtualFile):
            return NotImplemented
        return (
            self._data == other._data
            and self._last_modified == other._last_modified
        )

    def __hash__(self) -> int:
        return hash((self._data, self._last_modified))

    def __repr__(self) -> str:
        return (
            f"BytesVirtualFile(length={len(self._data)}, "
            f"last_modified={self._last_modified.isoformat()})"
        )
