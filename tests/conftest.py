from datetime import datetime, timezone

import pytest
from virtfs import BytesVirtualFile, VirtualFileStore
from virtfs._pytest_plugin import vfs  # noqa: F401

STAMP = datetime(2024, 1, 20, tzinfo=timezone.utc)


@pytest.fixture
def ci_vfs() -> VirtualFileStore:
    """Case-insensitive store."""
    return VirtualFileStore(case_sensitive=False)


@pytest.fixture
def make_file():
    def _make(data: bytes = b"data", last_modified: datetime = STAMP) -> BytesVirtualFile:
        return BytesVirtualFile(data, last_modified)

    return _make


@pytest.fixture
def sample_vfs(vfs, make_file):
    """/a.txt, /sub/b.txt, /sub/nested/c.txt"""
    vfs.add("/a.txt", make_file(b"A"))
    vfs.add("/sub/b.txt", make_file(b"B"))
    vfs.add("/sub/nested/c.txt", make_file(b"C"))
    return vfs
