"""Process-wide identity cache for Locale objects.

One Locale exists per normalized (code, numbering, calendar) triple. The cache
is populated on demand and never evicts: its key space is the set of locale
configurations an application actually requests, which is small and under the
application's control. clear() exists for tests.

Thread-safe via RLock, using the double-check pattern so that concurrent
requests for the same key always receive the same instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from threading import RLock

__all__ = ["LocaleCache", "default_cache"]

logger = logging.getLogger(__name__)


class LocaleCache[K: Hashable, V]:
    """Unbounded get-or-create map.

    Example:
        >>> cache = LocaleCache()
        >>> first = cache.get_or_create("en-us", lambda: object())
        >>> cache.get_or_create("en-us", lambda: object()) is first
        True
        >>> cache.size()
        1
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}
        self._lock = RLock()

    def get(self, key: K) -> V | None:
        with self._lock:
            return self._entries.get(key)

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        """Return the cached value for ``key``, building it once on a miss.

        The factory runs outside the lock. If another thread inserted the key
        in the meantime, its value wins and the freshly built one is dropped.
        A factory that raises leaves the cache unchanged.
        """
        with self._lock:
            if key in self._entries:
                return self._entries[key]

        logger.debug("Locale cache miss for %r", key)
        fresh = factory()

        with self._lock:
            return self._entries.setdefault(key, fresh)

    def clear(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def info(self) -> dict[str, int | tuple[K, ...]]:
        """Cache statistics: entry count and keys in insertion order."""
        with self._lock:
            return {"size": len(self._entries), "keys": tuple(self._entries)}

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


default_cache: LocaleCache = LocaleCache()
