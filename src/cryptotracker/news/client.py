"""Remote news endpoints with response caching."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from cryptotracker.cache import TTLCache, make_cache_key
from cryptotracker.data import Article, Category, NewsPage
from cryptotracker.errors import INVALID_RESPONSE, ParseError, ProtocolError
from cryptotracker.transport import Fetcher

logger = logging.getLogger(__name__)

NEWS_PATH = "/api/v1/news"
LATEST_NEWS_PATH = "/api/v1/news/latest"
CATEGORIES_PATH = "/api/v1/news/categories"

ALL_CATEGORIES = "all"


class NewsClient:
    """Fetch news from the backend, serving repeat requests from a TTL cache.

    Every endpoint answers ``{"success": bool, "data": ..., "error": str?}``.
    ``success: false`` or a missing ``data`` raises ``ProtocolError`` with the
    backend's error text; a payload of the wrong shape raises ``ParseError``.
    Only validated payloads are cached, keyed by endpoint and sorted params.

    Args:
        fetcher: Backend fetcher.
        cache: Optional response cache.
    """

    def __init__(self, fetcher: Fetcher, *, cache: TTLCache | None = None) -> None:
        self._fetcher = fetcher
        self._cache = cache

    async def get_news(
        self,
        page: int = 1,
        limit: int = 20,
        category: str = ALL_CATEGORIES,
    ) -> NewsPage:
        """Fetch one page of the news listing.

        Args:
            page: 1-based page number.
            limit: Articles per page.
            category: Category filter; "all" applies no filter.
        """
        params: dict[str, Any] = {"page": page, "limit": limit}
        if category and category != ALL_CATEGORIES:
            params["category"] = category
        data = await self._get(NEWS_PATH, params)

        if isinstance(data, list):
            return NewsPage(articles=tuple(parse_articles(data)), page=page, total_pages=1)
        if isinstance(data, dict):
            items = data.get("articles", data.get("data", []))
            return NewsPage(
                articles=tuple(parse_articles(items)),
                page=_as_int(data.get("page"), page),
                total_pages=_as_int(data.get("total_pages"), 1),
            )
        raise ParseError("News listing 'data' is neither a list nor an object")

    async def get_latest(self, limit: int = 10) -> list[Article]:
        """Fetch the most recent articles, newest first."""
        data = await self._get(LATEST_NEWS_PATH, {"limit": limit})
        if isinstance(data, dict):
            data = data.get("articles", [])
        return parse_articles(data)[:limit]

    async def get_categories(self) -> list[Category]:
        """Fetch the news categories and their article counts."""
        data = await self._get(CATEGORIES_PATH)
        if isinstance(data, dict):
            data = data.get("categories", [])
        if not isinstance(data, list):
            raise ParseError("News categories 'data' is not a list")

        categories: list[Category] = []
        for item in data:
            if not isinstance(item, dict) or not item.get("name"):
                raise ParseError(f"Malformed news category: {item!r}")
            categories.append(Category(name=str(item["name"]), count=_as_int(item.get("count"), 0)))
        return categories

    def invalidate(self) -> None:
        """Drop every cached news response."""
        if self._cache is not None:
            self._cache.clear()

    async def _get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        key = make_cache_key(path, params)
        if self._cache is not None:
            cached = self._cache.get(key)
            if cached is not None:
                return unwrap_envelope(cached)

        payload = await self._fetcher.fetch(path, params)
        data = unwrap_envelope(payload)

        if self._cache is not None:
            self._cache.set(key, payload)
        return data


def unwrap_envelope(payload: Any) -> Any:
    """Return ``payload["data"]`` after checking the success flag.

    Raises:
        ParseError: If the payload is not a JSON object.
        ProtocolError: If ``success`` is false or ``data`` is missing.
    """
    if not isinstance(payload, dict):
        raise ParseError("Response is not a JSON object")
    if not payload.get("success") or payload.get("data") is None:
        raise ProtocolError(str(payload.get("error") or INVALID_RESPONSE))
    return payload["data"]


def parse_articles(items: Any) -> list[Article]:
    """Convert raw article objects into ``Article`` instances.

    Items lacking a title or URL are dropped. ``source`` may be a name or an
    object with a ``name`` field. ``published_at`` may be an ISO 8601 string
    or Unix epoch seconds; any other value is dropped.

    Raises:
        ParseError: If ``items`` is not a list.
    """
    if not isinstance(items, list):
        raise ParseError("Article list is not a list")

    articles: list[Article] = []
    for item in items:
        if not isinstance(item, dict):
            logger.debug("Skipping non-object article: %r", item)
            continue
        title = item.get("title")
        url = item.get("url")
        if not title or not url:
            logger.debug("Skipping article without title or url: %s", item)
            continue

        source = item.get("source")
        if isinstance(source, dict):
            source = source.get("name") or source.get("title")
        articles.append(
            Article(
                title=str(title),
                url=str(url),
                source=str(source) if source else "Unknown",
                published_at=_as_timestamp(item.get("published_at") or item.get("publishedAt")),
                category=str(item.get("category") or "general"),
                description=_as_text(item.get("description")),
            )
        )
    return articles


def _as_timestamp(value: Any) -> str | None:
    """Return an ISO 8601 string; numeric values are read as Unix epoch seconds."""
    if isinstance(value, str):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=UTC).isoformat()
        except (OverflowError, OSError, ValueError):
            logger.debug("Dropping out-of-range epoch timestamp: %r", value)
            return None
    return None


def _as_text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default
