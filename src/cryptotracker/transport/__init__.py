"""Backend transport."""

from cryptotracker.transport.base import Fetcher
from cryptotracker.transport.http import DEFAULT_BASE_URL, HttpFetcher

__all__ = [
    "DEFAULT_BASE_URL",
    "Fetcher",
    "HttpFetcher",
]
