"""Time-to-live cache over key/value storage."""

import json
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

from cryptotracker.data import CacheEntry
from cryptotracker.errors import StorageError
from cryptotracker.storage import InMemoryStorage, KeyValueStorage

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "cryptotracker_cache:"


def make_cache_key(endpoint: str, params: Mapping[str, Any] | None = None) -> str:
    """Build a cache key from an endpoint and its query parameters.

    Parameters are sorted by name so that equivalent requests share a key
    regardless of argument order.

    Example:
        >>> make_cache_key("/api/v1/news", {"page": 1, "limit": 20})
        '/api/v1/news?limit=20&page=1'
    """
    if not params:
        return endpoint
    query = "&".join(f"{k}={params[k]}" for k in sorted(params))
    return f"{endpoint}?{query}"


class TTLCache:
    """Best-effort cache whose entries expire ``ttl`` seconds after being stored.

    Values are stored as JSON, so the cache always holds its own structural
    copy: mutating an object after ``set`` or after ``get`` never changes
    what the cache returns next. Values must therefore be JSON-serializable.

    An expired entry is evicted from the backing storage the first time it is
    looked up, so it cannot reappear without a new ``set``. Storage failures
    never reach the caller: a rejected write is logged and dropped, and an
    unreadable entry is evicted and reported as a miss.

    Args:
        ttl: Default time-to-live in seconds.
        storage: Backing storage (default: a private ``InMemoryStorage``).
        namespace: Prefix for storage keys, keeping several caches apart in
            one storage.
        clock: Wall-clock source in seconds (default ``time.time``).
    """

    def __init__(
        self,
        ttl: float,
        *,
        storage: KeyValueStorage | None = None,
        namespace: str = CACHE_KEY_PREFIX,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ttl = ttl
        self._storage: KeyValueStorage = storage if storage is not None else InMemoryStorage()
        self._namespace = namespace
        self._clock = clock
        self._keys: set[str] = set()

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: str) -> Any | None:
        """Return the cached value for ``key``, or None on a miss."""
        found = self._read(key)
        if found is None:
            return None

        entry, entry_ttl = found
        ttl = self._ttl if entry_ttl is None else entry_ttl
        age = self._clock() - entry.stored_at
        if age > ttl:
            logger.debug("Cache entry '%s' expired (age %.1fs > ttl %.1fs)", key, age, ttl)
            self.invalidate(key)
            return None

        logger.debug("Cache hit for '%s'", key)
        return entry.value

    def set(self, key: str, value: Any, *, ttl: float | None = None) -> bool:
        """Store ``value`` under ``key``.

        Args:
            key: Cache key.
            value: JSON-serializable value.
            ttl: Per-entry time-to-live overriding the cache default.

        Returns:
            True if the value was stored, False if the write was rejected.
        """
        record = {"value": value, "stored_at": self._clock(), "ttl": ttl}
        try:
            payload = json.dumps(record)
        except (TypeError, ValueError):
            logger.warning("Value for cache key '%s' is not JSON-serializable; not caching", key)
            return False
        try:
            self._storage.set(self._storage_key(key), payload)
        except StorageError as e:
            logger.warning("Cache write for '%s' failed: %s", key, e)
            return False
        self._keys.add(key)
        return True

    def invalidate(self, key: str) -> None:
        """Remove ``key`` from the cache."""
        self._keys.discard(key)
        try:
            self._storage.remove(self._storage_key(key))
        except StorageError as e:
            logger.warning("Cache eviction for '%s' failed: %s", key, e)

    def clear(self) -> None:
        """Remove every entry this cache has stored."""
        for key in list(self._keys):
            self.invalidate(key)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def _storage_key(self, key: str) -> str:
        return f"{self._namespace}{key}"

    def _read(self, key: str) -> tuple[CacheEntry, float | None] | None:
        try:
            payload = self._storage.get(self._storage_key(key))
        except StorageError as e:
            logger.warning("Cache read for '%s' failed: %s", key, e)
            return None
        if payload is None:
            return None
        try:
            record = json.loads(payload)
            entry = CacheEntry(value=record["value"], stored_at=float(record["stored_at"]))
            ttl = record.get("ttl")
            return (entry, float(ttl) if ttl is not None else None)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Corrupt cache entry '%s' evicted: %s", key, e)
            self.invalidate(key)
            return None
