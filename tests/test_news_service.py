"""Tests for NewsService."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from cryptotracker.data import Article, Category
from cryptotracker.errors import TransportError
from cryptotracker.news import CATEGORIES_PATH, TRENDING_POOL_SIZE, NewsClient, NewsService
from cryptotracker.recent import BookmarkStore
from cryptotracker.storage import InMemoryStorage

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def _article(title: str, hours_ago: float = 1, source: str = "CoinDesk") -> Article:
    return Article(
        title=title,
        url=f"https://example.com/{title.replace(' ', '-').lower()}",
        source=source,
        published_at=(NOW - timedelta(hours=hours_ago)).isoformat(),
    )


CAT = _article("Cat video", hours_ago=0)
BTC = _article("Bitcoin surges", hours_ago=0, source="Decrypt")
OLD = _article("Weekly recap", hours_ago=72)


@pytest.fixture
def client() -> MagicMock:
    client = MagicMock()
    client.get_latest = AsyncMock(return_value=[CAT, BTC, OLD])
    client.get_categories = AsyncMock(
        return_value=[Category("bitcoin", 30), Category("ethereum", 10)]
    )
    client.get_news = AsyncMock()
    return client


@pytest.fixture
def bookmarks() -> BookmarkStore:
    return BookmarkStore(InMemoryStorage(), "alice")


@pytest.fixture
def service(client: MagicMock, bookmarks: BookmarkStore) -> NewsService:
    return NewsService(client, bookmarks=bookmarks)


class TestTrending:
    """Tests for trending ranking."""

    async def test_ranks_keyword_matches_first(
        self, service: NewsService, client: MagicMock
    ) -> None:
        trending = await service.get_trending(limit=2, keywords=["bitcoin", "surge"], now=NOW)
        assert trending == [BTC, CAT]
        client.get_latest.assert_awaited_once_with(limit=TRENDING_POOL_SIZE)

    async def test_default_keywords(self, service: NewsService) -> None:
        trending = await service.get_trending(limit=1, now=NOW)
        assert trending == [BTC]

    async def test_custom_pool_size(self, client: MagicMock) -> None:
        service = NewsService(client, pool_size=20)
        await service.get_trending(now=NOW)
        client.get_latest.assert_awaited_once_with(limit=20)

    async def test_errors_propagate(self, service: NewsService, client: MagicMock) -> None:
        client.get_latest.side_effect = TransportError("offline")
        with pytest.raises(TransportError):
            await service.get_trending(now=NOW)


class TestAnalytics:
    """Tests for the analytics summary."""

    async def test_summary(self, service: NewsService) -> None:
        summary = await service.get_analytics(now=NOW)
        assert summary.total_articles == 40
        assert [s.percentage for s in summary.category_distribution] == ["75.0", "25.0"]
        assert summary.last_24h_count == 2
        assert summary.top_sources[0].source == "CoinDesk"
        assert summary.top_sources[0].count == 2

    async def test_errors_propagate(self, service: NewsService, client: MagicMock) -> None:
        client.get_categories.side_effect = TransportError("offline")
        with pytest.raises(TransportError):
            await service.get_analytics(now=NOW)


class TestPassThrough:
    """Tests for the plain listing calls."""

    async def test_get_news(self, service: NewsService, client: MagicMock) -> None:
        await service.get_news(page=2, limit=10, category="defi")
        client.get_news.assert_awaited_once_with(page=2, limit=10, category="defi")

    async def test_get_latest(self, service: NewsService, client: MagicMock) -> None:
        assert await service.get_latest(limit=3) == [CAT, BTC, OLD]
        client.get_latest.assert_awaited_once_with(limit=3)

    async def test_get_categories(self, service: NewsService) -> None:
        assert len(await service.get_categories()) == 2


class TestBookmarks:
    """Tests for bookmark handling."""

    def test_toggle(self, service: NewsService) -> None:
        assert service.toggle_bookmark(BTC) is True
        assert service.is_bookmarked(BTC.url)
        assert service.get_bookmarks() == [BTC]
        assert service.toggle_bookmark(BTC) is False
        assert not service.is_bookmarked(BTC.url)

    def test_most_recent_first(self, service: NewsService) -> None:
        service.toggle_bookmark(CAT)
        service.toggle_bookmark(BTC)
        assert service.get_bookmarks() == [BTC, CAT]

    def test_clear(self, service: NewsService) -> None:
        service.toggle_bookmark(CAT)
        assert service.clear_bookmarks() is True
        assert service.get_bookmarks() == []

    def test_disabled(self, client: MagicMock) -> None:
        service = NewsService(client)
        assert service.toggle_bookmark(CAT) is False
        assert service.get_bookmarks() == []
        assert not service.is_bookmarked(CAT.url)
        assert service.clear_bookmarks() is True


class TestBackendData:
    """Tests running the real NewsClient over unusual backend payloads."""

    async def test_epoch_timestamps(self) -> None:
        fetcher = MagicMock()
        fetcher.fetch = AsyncMock(
            return_value={
                "success": True,
                "data": [
                    {"title": "Bitcoin surges", "url": "https://a", "published_at": 1760000000},
                    {"title": "Cat video", "url": "https://b", "published_at": {"at": "now"}},
                ],
            }
        )
        service = NewsService(NewsClient(fetcher))

        trending = await service.get_trending(limit=5)

        assert [a.url for a in trending] == ["https://a", "https://b"]
        assert trending[1].published_at is None

    async def test_analytics_with_epoch_timestamps(self) -> None:
        published = datetime(2026, 3, 1, 11, 0, tzinfo=UTC).timestamp()

        async def fetch(path: str, params: object = None) -> object:
            if path == CATEGORIES_PATH:
                return {"success": True, "data": [{"name": "bitcoin", "count": 1}]}
            return {
                "success": True,
                "data": [{"title": "t", "url": "https://a", "published_at": published}],
            }

        fetcher = MagicMock()
        fetcher.fetch = fetch
        summary = await NewsService(NewsClient(fetcher)).get_analytics(now=NOW)
        assert summary.last_24h_count == 1
