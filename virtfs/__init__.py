from ._exceptions import VFSChangeCallbackError
from ._glob import GlobMatcher
from ._info import (
    DirectoryContents,
    NotFoundFileInfo,
    VirtualDirectoryInfo,
    VirtualFileInfo,
)
from ._listing import synthesize_directory
from ._notify import CallbackRegistration, ChangeNotifier, ChangeToken
from ._path import normalize_dir_path, normalize_path
from ._source import MIN_TIMESTAMP, BytesVirtualFile, VirtualFile
from ._store import VirtualFileStore
from ._typing import ChangeTokenLike, DirectoryContentsLike, FileInfo, FileProvider

__all__ = [
    "VirtualFileStore",
    "VirtualFile",
    "BytesVirtualFile",
    "VirtualFileInfo",
    "VirtualDirectoryInfo",
    "NotFoundFileInfo",
    "DirectoryContents",
    "ChangeToken",
    "ChangeNotifier",
    "CallbackRegistration",
    "GlobMatcher",
    "synthesize_directory",
    "normalize_path",
    "normalize_dir_path",
    "VFSChangeCallbackError",
    "FileInfo",
    "FileProvider",
    "ChangeTokenLike",
    "DirectoryContentsLike",
    "MIN_TIMESTAMP",
]
__version__ = "0.1.0"
