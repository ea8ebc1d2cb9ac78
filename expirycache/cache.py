"""An in-memory, thread-safe key/value cache with per-item expiry."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from typing import Any, Callable

from .errors import CacheError, KeyExpiredError, KeyNotFoundError, NilValueError
from .item import Item

Duration = "float | timedelta"


def _to_seconds(duration: float | timedelta) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


class Cache:
    """In-memory cache with expiring entries.

    Durations are given in seconds or as :class:`datetime.timedelta`.
    A default expiration of 0 means items never expire by default; a
    cleanup interval above 0 starts a background thread that removes
    expired items periodically.
    """

    def __init__(
        self,
        default_expiration: float | timedelta = 0,
        cleanup_interval: float | timedelta = 0,
    ) -> None:
        self._items: dict[str, Item] = {}
        self._lock = threading.Lock()
        self.default_expiration = _to_seconds(default_expiration)
        self.cleanup_interval = _to_seconds(cleanup_interval)
        self._stop_event = threading.Event()
        self._cleaner: threading.Thread | None = None
        if self.cleanup_interval > 0:
            self._cleaner = threading.Thread(
                target=self._cleanup_loop, name="expirycache-cleanup", daemon=True
            )
            self._cleaner.start()

    def _cleanup_loop(self) -> None:
        while not self._stop_event.wait(self.cleanup_interval):
            self.delete_expired()

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` using the default expiration."""
        self.set_with_expiration(key, value, self.default_expiration)

    def set_with_expiration(
        self, key: str, value: Any, duration: float | timedelta
    ) -> None:
        """Store ``value`` under ``key``; a duration of 0 or less never expires."""
        if value is None:
            raise NilValueError()
        seconds = _to_seconds(duration)
        expiration = time.time_ns() + int(seconds * 1_000_000_000) if seconds > 0 else 0
        with self._lock:
            self._items[key] = Item(value, expiration)

    def get(self, key: str) -> Any:
        """Return the value for ``key``.

        Raises KeyNotFoundError if absent and KeyExpiredError if expired;
        an expired entry is removed.
        """
        with self._lock:
            item = self._items.get(key)
            if item is None:
                raise KeyNotFoundError()
            if item.expired():
                del self._items[key]
                raise KeyExpiredError()
            return item.value

    def get_or_set(self, key: str, fn: Callable[[], Any]) -> Any:
        """Return the cached value, or compute it with ``fn``, store and return it."""
        try:
            return self.get(key)
        except CacheError:
            pass
        value = fn()
        self.set(key, value)
        return value

    def delete(self, key: str) -> bool:
        """Remove ``key``; return True if it was present."""
        with self._lock:
            return self._items.pop(key, None) is not None

    def delete_expired(self) -> None:
        """Remove every expired item."""
        now = time.time_ns()
        with self._lock:
            self._items = {
                k: v
                for k, v in self._items.items()
                if not (v.expiration > 0 and now > v.expiration)
            }

    def items(self) -> dict[str, Any]:
        """Return a copy of all unexpired items as a plain dict."""
        now = time.time_ns()
        with self._lock:
            return {
                k: v.value
                for k, v in self._items.items()
                if v.expiration == 0 or now < v.expiration
            }

    def item_count(self) -> int:
        """Return the number of stored items, expired ones included."""
        with self._lock:
            return len(self._items)

    def flush(self) -> None:
        """Remove all items."""
        with self._lock:
            self._items = {}

    def stop(self) -> None:
        """Stop the background cleanup thread, if one is running."""
        if self._cleaner is not None:
            self._stop_event.set()
            self._cleaner.join()
            self._cleaner = None

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()