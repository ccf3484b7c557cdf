"""Bounded, deduplicated, most-recent-first lists persisted in storage."""

import dataclasses
import json
import logging
from typing import Any, Generic, TypeVar

from cryptotracker.errors import StorageError
from cryptotracker.storage import KeyValueStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecencyStore(Generic[T]):
    """A capped most-recent-first list of dataclass items, keyed by one field.

    The list lives in storage as a JSON array and is re-read on every
    operation. A missing, unreadable or corrupt blob is treated as an empty
    list; storage failures are logged and never raised.

    Args:
        storage: Backing key/value storage.
        storage_key: Key under which the JSON array is stored.
        item_type: Dataclass type of the items.
        key_field: Name of the field that identifies an item (e.g. "id").
        limit: Maximum number of items kept; the oldest are evicted first.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str,
        *,
        item_type: type[T],
        key_field: str,
        limit: int,
    ) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self._storage = storage
        self._storage_key = storage_key
        self._item_type = item_type
        self._key_field = key_field
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    def load(self) -> list[T]:
        """Return the stored items, most recent first, at most ``limit`` long."""
        try:
            raw = self._storage.get(self._storage_key)
        except StorageError as e:
            logger.warning("Could not read '%s': %s", self._storage_key, e)
            return []
        if raw is None:
            return []
        try:
            entries = json.loads(raw)
            if not isinstance(entries, list):
                raise TypeError(f"expected a JSON array, got {type(entries).__name__}")
            items = [self._decode(entry) for entry in entries]
        except (ValueError, TypeError) as e:
            logger.warning("Ignoring corrupt data in '%s': %s", self._storage_key, e)
            return []
        return self._dedupe(items)[: self._limit]

    def record(self, item: T) -> bool:
        """Move ``item`` to the front, dropping older copies and overflow.

        Returns:
            True if the updated list was persisted.
        """
        key = self.key_of(item)
        items = [item] + [existing for existing in self.load() if self.key_of(existing) != key]
        return self._save(items[: self._limit])

    def remove(self, key: str) -> bool:
        """Drop the item whose key field equals ``key``.

        Returns:
            True if the updated list was persisted.
        """
        items = self.load()
        remaining = [item for item in items if self.key_of(item) != key]
        if len(remaining) == len(items):
            return True
        return self._save(remaining)

    def contains(self, key: str) -> bool:
        return any(self.key_of(item) == key for item in self.load())

    def clear(self) -> bool:
        """Remove the stored list.

        Returns:
            True if the storage accepted the removal.
        """
        try:
            self._storage.remove(self._storage_key)
        except StorageError as e:
            logger.warning("Could not clear '%s': %s", self._storage_key, e)
            return False
        return True

    def key_of(self, item: T) -> str:
        return str(getattr(item, self._key_field))

    def _decode(self, entry: Any) -> T:
        if not isinstance(entry, dict):
            raise TypeError(f"expected a JSON object, got {type(entry).__name__}")
        return self._item_type(**entry)

    def _dedupe(self, items: list[T]) -> list[T]:
        seen: set[str] = set()
        unique: list[T] = []
        for item in items:
            key = self.key_of(item)
            if key not in seen:
                seen.add(key)
                unique.append(item)
        return unique

    def _save(self, items: list[T]) -> bool:
        payload = json.dumps([dataclasses.asdict(item) for item in items])  # type: ignore[arg-type]
        try:
            self._storage.set(self._storage_key, payload)
        except StorageError as e:
            logger.warning("Could not save '%s': %s", self._storage_key, e)
            return False
        return True
