"""Key/value storage backends."""

from cryptotracker.storage.base import KeyValueStorage
from cryptotracker.storage.file import JsonFileStorage
from cryptotracker.storage.memory import InMemoryStorage

__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
]
