"""Protocol for persisted key/value storage."""

from typing import Protocol


class KeyValueStorage(Protocol):
    """Interface for synchronous string key/value storage.

    Implementations raise ``StorageError`` when a write is rejected
    (e.g. quota exceeded) or the backing store cannot be read.
    """

    def get(self, key: str) -> str | None:
        """Return the stored string, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is not an error."""
        ...
