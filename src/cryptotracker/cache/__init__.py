"""Response caching."""

from cryptotracker.cache.ttl import CACHE_KEY_PREFIX, TTLCache, make_cache_key

__all__ = [
    "CACHE_KEY_PREFIX",
    "TTLCache",
    "make_cache_key",
]
