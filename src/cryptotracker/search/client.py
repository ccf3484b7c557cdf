"""Remote coin search."""

import logging
from typing import Any
from urllib.parse import quote

from cryptotracker.cache import TTLCache, make_cache_key
from cryptotracker.data import SearchResult
from cryptotracker.errors import ParseError
from cryptotracker.transport import Fetcher

logger = logging.getLogger(__name__)

SEARCH_PATH = "/api/v1/search"


class SearchClient:
    """Query the backend's coin search endpoint.

    ``GET /api/v1/search/{query}`` answers ``{"data": {"results": [...]}}``.
    A body without ``data.results`` means no matches. Transport and status
    failures propagate as the fetcher's typed errors; a body of the wrong
    shape raises ``ParseError``.

    Args:
        fetcher: Backend fetcher.
        cache: Optional response cache. Only successful responses are cached.
    """

    def __init__(self, fetcher: Fetcher, *, cache: TTLCache | None = None) -> None:
        self._fetcher = fetcher
        self._cache = cache

    async def search(self, query: str) -> list[SearchResult]:
        """Search coins by name or symbol.

        Args:
            query: User query; surrounding whitespace is ignored.

        Returns:
            Matching coins in backend order.
        """
        query = query.strip()
        cache_key = make_cache_key(SEARCH_PATH, {"q": query.lower()})

        if self._cache is not None:
            cached = self._cache.get(cache_key)
            if cached is not None:
                return _parse(cached)

        payload = await self._fetcher.fetch(f"{SEARCH_PATH}/{quote(query, safe='')}")
        results = _parse(payload)

        if self._cache is not None:
            self._cache.set(cache_key, payload)
        return results


def parse_search_results(payload: Any) -> list[SearchResult]:
    """Convert a search response body into ``SearchResult`` objects.

    Accepts the backend's field names (``coin_id``, ``market_cap_rank``)
    as well as the short ones (``id``, ``rank``). Items without an id are
    skipped.

    Raises:
        ParseError: If the body or an item is not a JSON object, or
            ``results`` is not a list.
    """
    if not isinstance(payload, dict):
        raise ParseError("Search response is not a JSON object")
    data = payload.get("data")
    if data is None:
        return []
    if not isinstance(data, dict):
        raise ParseError("Search response 'data' is not an object")
    items = data.get("results") or []
    if not isinstance(items, list):
        raise ParseError("Search response 'results' is not a list")

    results: list[SearchResult] = []
    for item in items:
        if not isinstance(item, dict):
            raise ParseError(f"Search result is not an object: {item!r}")
        coin_id = item.get("id") or item.get("coin_id")
        if not coin_id:
            logger.debug("Skipping search result without id: %s", item)
            continue
        rank = item.get("rank", item.get("market_cap_rank"))
        results.append(
            SearchResult(
                id=str(coin_id),
                name=str(item.get("name") or coin_id),
                symbol=str(item.get("symbol") or ""),
                rank=_as_int(rank),
                image_url=item.get("image_url") or item.get("imageUrl") or item.get("image"),
            )
        )
    return results


def _parse(payload: Any) -> list[SearchResult]:
    try:
        return parse_search_results(payload)
    except ParseError:
        raise
    except (TypeError, ValueError, OverflowError, AttributeError, KeyError) as e:
        raise ParseError(f"Malformed search response: {e}") from e


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None
