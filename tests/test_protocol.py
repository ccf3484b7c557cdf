"""Tests for protocol compliance."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from cryptotracker.cache import TTLCache
from cryptotracker.data import Article
from cryptotracker.news import NewsService
from cryptotracker.ranker import TrendingRanker
from cryptotracker.recent import RecencyStore
from cryptotracker.search import SearchClient
from cryptotracker.storage import InMemoryStorage, JsonFileStorage
from cryptotracker.transport import HttpFetcher


def test_http_fetcher_matches_protocol() -> None:
    """Verify HttpFetcher structurally matches the Fetcher protocol."""
    fetcher = HttpFetcher()
    assert hasattr(fetcher, "fetch")
    assert callable(fetcher.fetch)


def test_storages_match_protocol(tmp_path: Path) -> None:
    """Verify both storage backends provide get, set and remove."""
    for storage in (InMemoryStorage(), JsonFileStorage(tmp_path / "s.json")):
        for name in ("get", "set", "remove"):
            assert callable(getattr(storage, name))


def test_trending_ranker_matches_protocol() -> None:
    ranker = TrendingRanker()
    assert callable(ranker.rank)


class MockFetcher:
    """A minimal implementation to verify protocol requirements."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def fetch(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        self.calls.append(path)
        return {"data": {"results": [{"id": "bitcoin", "name": "Bitcoin", "symbol": "btc"}]}}


async def test_mock_fetcher_satisfies_protocol() -> None:
    """Any class with an async fetch method can back a SearchClient."""
    fetcher = MockFetcher()
    results = await SearchClient(fetcher, cache=TTLCache(60)).search("bit")
    assert results[0].id == "bitcoin"
    assert fetcher.calls == ["/api/v1/search/bit"]


class DictStorage:
    """Plain dict-backed storage with the protocol's three methods."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


def test_custom_storage_backs_cache_and_recent() -> None:
    storage = DictStorage()
    cache = TTLCache(60, storage=storage)
    assert cache.set("k", {"v": 1})
    assert cache.get("k") == {"v": 1}

    recent: RecencyStore[Article] = RecencyStore(
        storage, "recent", item_type=Article, key_field="url", limit=2
    )
    assert recent.record(Article(title="t", url="u"))
    assert "recent" in storage.data


class ReverseRanker:
    """Ranker that returns candidates in reverse order."""

    def rank(
        self,
        candidates: list[Article],
        keywords: Iterable[str],
        limit: int,
        *,
        now: datetime | None = None,
    ) -> list[Article]:
        return list(reversed(candidates))[:limit]


async def test_custom_ranker_used_by_news_service() -> None:
    a = Article(title="a", url="https://example.com/a")
    b = Article(title="b", url="https://example.com/b")
    client = MagicMock()
    client.get_latest = AsyncMock(return_value=[a, b])
    service = NewsService(client, ranker=ReverseRanker())
    assert await service.get_trending(limit=2) == [b, a]
