"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["virtfs._pytest_plugin"]

This makes the ``vfs`` fixture automatically available::

    def test_something(vfs):
        vfs.add("/a.txt", BytesVirtualFile(b"hello"))
"""

import pytest

from ._store import VirtualFileStore


@pytest.fixture
def vfs() -> VirtualFileStore:
    """A case-sensitive :class:`VirtualFileStore`, fresh for every test."""
    return VirtualFileStore()
