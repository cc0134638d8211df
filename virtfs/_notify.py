from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any

from ._exceptions import VFSChangeCallbackError
from ._glob import GlobMatcher

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Any], object]


class CallbackRegistration:
    __slots__ = ("_token", "_key")

    def __init__(self, token: ChangeToken | None, key: int) -> None:
        self._token = token
        self._key = key

    def dispose(self) -> None:
        token, self._token = self._token, None
        if token is not None:
            token._unregister(self._key)

    def __enter__(self) -> CallbackRegistration:
        return self

    def __exit__(self, *args) -> None:
        self.dispose()


class ChangeToken:
    """One-shot change signal handed out by :meth:`ChangeNotifier.watch`.

    The token starts unfired.  When a matching mutation happens the
    notifier fires it exactly once: ``has_changed`` flips to True, every
    registered callback runs inline on the mutating thread, and waiters are
    released.  A fired token never resets; watch again to get a new one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._event = threading.Event()
        self._callbacks: dict[int, tuple[ChangeCallback, Any]] = {}
        self._next_key: int = 0

    @property
    def has_changed(self) -> bool:
        return self._event.is_set()

    @property
    def active_change_callbacks(self) -> bool:
        return True

    def register_callback(
        self, callback: ChangeCallback, state: Any = None
    ) -> CallbackRegistration:
        with self._lock:
            if not self._event.is_set():
                key = self._next_key
                self._next_key += 1
                self._callbacks[key] = (callback, state)
                return CallbackRegistration(self, key)
        # Already fired: run now, like registering on a cancelled token
        callback(state)
        return CallbackRegistration(None, -1)

    def wait(self, timeout: float | None = None) -> bool:
        return self._event.wait(timeout)

    def _unregister(self, key: int) -> None:
        with self._lock:
            self._callbacks.pop(key, None)

    def _fire(self) -> list[BaseException]:
        with self._lock:
            if self._event.is_set():
                return []
            self._event.set()
            callbacks = list(self._callbacks.values())
            self._callbacks.clear()
        errors: list[BaseException] = []
        for callback, state in callbacks:
            try:
                callback(state)
            except Exception as exc:
                logger.exception("Change callback %r failed", callback)
                errors.append(exc)
        return errors

    def __repr__(self) -> str:
        return f"ChangeToken(has_changed={self.has_changed})"


class ChangeNotifier:
    """Registry of pending glob watches, keyed by the literal pattern."""

    def __init__(self, case_sensitive: bool = True) -> None:
        self._case_sensitive = case_sensitive
        self._listeners: dict[str, ChangeToken] = {}
        self._lock = threading.Lock()

    def watch(self, pattern: str) -> ChangeToken:
        with self._lock:
            token = self._listeners.get(pattern)
            if token is None:
                token = ChangeToken()
                self._listeners[pattern] = token
            return token

    @property
    def pending_patterns(self) -> list[str]:
        with self._lock:
            return list(self._listeners)

    def notify(self, paths: Iterable[str]) -> None:
        touched = list(paths)
        if not touched:
            return
        with self._lock:
            patterns = list(self._listeners)
        errors: list[BaseException] = []
        for pattern in patterns:
            matcher = GlobMatcher(pattern, self._case_sensitive)
            if not matcher.match_any(touched):
                continue
            with self._lock:
                token = self._listeners.pop(pattern, None)
            if token is None:
                # Fired by a concurrent notify
                continue
            logger.debug("Watch %r fired by %d path(s)", pattern, len(touched))
            errors.extend(token._fire())
        if errors:
            raise VFSChangeCallbackError(errors)
