"""JSON-file-backed key/value storage."""

import json
from pathlib import Path

from cryptotracker.errors import StorageError


class JsonFileStorage:
    """Persist string values in a single JSON object on disk.

    The file is re-read on every access so that several storage instances
    pointing at the same path observe each other's writes. A file that does
    not hold a JSON object raises ``StorageError`` rather than being silently
    overwritten.

    Args:
        path: Location of the JSON file. Parent directories are created on
            the first write.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._write(data)

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(f"Could not read storage file {self._path}: {e}") from e
        if not isinstance(raw, dict):
            raise StorageError(f"Storage file {self._path} does not contain a JSON object")
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write storage file {self._path}: {e}") from e
