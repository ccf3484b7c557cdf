"""In-memory key/value storage with an optional byte quota."""

from cryptotracker.errors import StorageError


class InMemoryStorage:
    """Dictionary-backed storage.

    When ``quota_bytes`` is set, a write that would push the total size of
    keys and values past the quota is rejected with ``StorageError``, the
    same way browser local storage rejects writes when it is full.

    Args:
        quota_bytes: Maximum total UTF-8 size of all keys and values, or None
            for no limit.
    """

    def __init__(self, *, quota_bytes: int | None = None) -> None:
        self._quota = quota_bytes
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota is not None:
            current = self.size_bytes() - _entry_size(key, self._data.get(key))
            needed = current + _entry_size(key, value)
            if needed > self._quota:
                raise StorageError(
                    f"Storage quota exceeded writing '{key}' ({needed} > {self._quota} bytes)"
                )
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)

    def size_bytes(self) -> int:
        """Total UTF-8 size of all stored keys and values."""
        return sum(_entry_size(k, v) for k, v in self._data.items())


def _entry_size(key: str, value: str | None) -> int:
    if value is None:
        return 0
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))
