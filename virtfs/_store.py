from __future__ import annotations

import logging
import operator
import threading
from collections.abc import Callable, Iterable, Iterator

from ._info import DirectoryContents, NotFoundFileInfo, VirtualFileInfo
from ._listing import synthesize_directory
from ._notify import ChangeNotifier, ChangeToken
from ._path import normalize_dir_path, normalize_path
from ._source import VirtualFile

logger = logging.getLogger(__name__)

SourceComparer = Callable[[VirtualFile, VirtualFile], bool]


class VirtualFileStore:
    """Flat, thread-safe map of virtual files with a directory-tree view.

    Files are stored under their canonical path only; directories exist
    implicitly wherever a stored path has more segments below a prefix.
    Mutations can be observed with :meth:`watch`, which hands out one-shot
    :class:`ChangeToken` objects keyed by glob pattern.
    """

    def __init__(
        self,
        case_sensitive: bool = True,
        source_comparer: SourceComparer | None = None,
    ) -> None:
        if source_comparer is not None and not callable(source_comparer):
            raise TypeError(
                f"source_comparer must be callable, got {type(source_comparer).__name__}."
            )
        self._case_sensitive: bool = case_sensitive
        self._source_comparer: SourceComparer = source_comparer or operator.eq
        self._global_lock = threading.RLock()
        self._files: dict[str, VirtualFileInfo] = {}
        self._notifier = ChangeNotifier(case_sensitive)

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    # -- key helpers --

    def _key(self, npath: str) -> str:
        return npath if self._case_sensitive else npath.lower()

    def _sorted_snapshot(self) -> list[VirtualFileInfo]:
        with self._global_lock:
            entries = list(self._files.values())
        entries.sort(key=lambda e: self._key(e.path))
        return entries

    def create_file_info(self, path: str, source: VirtualFile) -> VirtualFileInfo:
        """Wrap *source* for storage at canonical *path*. Override to customize."""
        return VirtualFileInfo(path, source)

    # -- watching --

    def watch(self, pattern: str) -> ChangeToken:
        return self._notifier.watch(pattern)

    def _notify(self, paths: Iterable[str]) -> None:
        self._notifier.notify(paths)

    # -- mutation --

    def add(self, path: str, source: VirtualFile, skip_notify: bool = False) -> bool:
        npath = normalize_path(path)
        key = self._key(npath)
        info = self.create_file_info(npath, source)
        with self._global_lock:
            current = self._files.get(key)
            if current is not None and self._source_comparer(current.source, source):
                updated = False
            else:
                self._files[key] = info
                updated = True
        if not updated:
            logger.debug("Unchanged source for %s; keeping existing entry", npath)
            return False
        logger.debug("Stored %s (%d bytes)", npath, source.length)
        if not skip_notify:
            self._notify([npath])
        return True

    def remove(self, path: str, skip_notify: bool = False) -> bool:
        npath = normalize_path(path)
        with self._global_lock:
            removed = self._files.pop(self._key(npath), None)
        if removed is None:
            return False
        logger.debug("Removed %s", removed.path)
        if not skip_notify:
            self._notify([removed.path])
        return True

    def remove_many(self, paths: Iterable[str], skip_notify: bool = False) -> bool:
        removed: dict[str, str] = {}
        with self._global_lock:
            for path in paths:
                key = self._key(normalize_path(path))
                info = self._files.pop(key, None)
                if info is not None:
                    removed[key] = info.path
        if not removed:
            return False
        logger.debug("Removed %d path(s)", len(removed))
        if not skip_notify:
            self._notify(removed.values())
        return True

    def clear(self, skip_notify: bool = False) -> None:
        """Remove every entry.

        Note the flag polarity: with ``skip_notify=True`` watchers are
        notified with every path that was present; with the default
        ``skip_notify=False`` the store is emptied silently.
        """
        with self._global_lock:
            cleared = [info.path for info in self._files.values()]
            self._files.clear()
        logger.debug("Cleared %d path(s)", len(cleared))
        if skip_notify and cleared:
            self._notify(cleared)

    # -- queries --

    def try_get_source(self, path: str) -> VirtualFile | None:
        npath = normalize_path(path)
        with self._global_lock:
            info = self._files.get(self._key(npath))
        return info.source if info is not None else None

    def get_file_info(self, subpath: str) -> VirtualFileInfo | NotFoundFileInfo:
        npath = normalize_path(subpath)
        with self._global_lock:
            info = self._files.get(self._key(npath))
        if info is None:
            return NotFoundFileInfo(npath)
        return info

    def get_directory_contents(self, subpath: str) -> DirectoryContents:
        dir_path = normalize_dir_path(subpath)
        children = synthesize_directory(
            dir_path, self._sorted_snapshot(), self._case_sensitive
        )
        return DirectoryContents(children)

    def items(self) -> list[tuple[str, VirtualFileInfo]]:
        return [(info.path, info) for info in self._sorted_snapshot()]

    def __iter__(self) -> Iterator[str]:
        return iter([info.path for info in self._sorted_snapshot()])

    def __len__(self) -> int:
        with self._global_lock:
            return len(self._files)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        npath = normalize_path(path)
        with self._global_lock:
            return self._key(npath) in self._files
