"""News feed facade: listings, trending, analytics and bookmarks."""

import asyncio
import logging
from collections.abc import Iterable
from datetime import datetime

from cryptotracker.analytics import AnalyticsAggregator
from cryptotracker.data import AnalyticsSummary, Article, Category, NewsPage
from cryptotracker.news.client import ALL_CATEGORIES, NewsClient
from cryptotracker.ranker import DEFAULT_TRENDING_KEYWORDS, ArticleRanker, TrendingRanker
from cryptotracker.recent import BookmarkStore

logger = logging.getLogger(__name__)

# Trending and analytics only ever look at this many of the newest articles.
TRENDING_POOL_SIZE = 50


class NewsService:
    """Entry point for the news views.

    Errors from the backend (``TransportError``, ``ProtocolError``,
    ``ParseError``) propagate to the caller unchanged; bookmark storage
    failures never do.

    Args:
        client: News client.
        ranker: Trending ranker (default: ``TrendingRanker()``).
        aggregator: Analytics aggregator (default: ``AnalyticsAggregator()``).
        bookmarks: Bookmark store, or None to disable bookmarks.
        keywords: Default trending keywords.
        pool_size: Number of latest articles considered for trending and
            analytics (default 50).
    """

    def __init__(
        self,
        client: NewsClient,
        *,
        ranker: ArticleRanker | None = None,
        aggregator: AnalyticsAggregator | None = None,
        bookmarks: BookmarkStore | None = None,
        keywords: Iterable[str] = DEFAULT_TRENDING_KEYWORDS,
        pool_size: int = TRENDING_POOL_SIZE,
    ) -> None:
        self._client = client
        self._ranker: ArticleRanker = ranker or TrendingRanker()
        self._aggregator = aggregator or AnalyticsAggregator()
        self._bookmarks = bookmarks
        self._keywords = tuple(keywords)
        self._pool_size = pool_size

    @property
    def keywords(self) -> tuple[str, ...]:
        return self._keywords

    async def get_news(
        self,
        page: int = 1,
        limit: int = 20,
        category: str = ALL_CATEGORIES,
    ) -> NewsPage:
        return await self._client.get_news(page=page, limit=limit, category=category)

    async def get_latest(self, limit: int = 10) -> list[Article]:
        return await self._client.get_latest(limit=limit)

    async def get_categories(self) -> list[Category]:
        return await self._client.get_categories()

    async def get_trending(
        self,
        limit: int = 10,
        *,
        keywords: Iterable[str] | None = None,
        now: datetime | None = None,
    ) -> list[Article]:
        """Rank the latest articles by keyword relevance and recency.

        Args:
            limit: Maximum number of articles to return.
            keywords: Keywords to score against (default: the service's keywords).
            now: Reference time for the recency boost.
        """
        candidates = await self._client.get_latest(limit=self._pool_size)
        ranked = self._ranker.rank(
            candidates,
            self._keywords if keywords is None else tuple(keywords),
            limit,
            now=now,
        )
        logger.info(f"Trending: {len(ranked)} of {len(candidates)} candidates")
        return ranked

    async def get_analytics(self, *, now: datetime | None = None) -> AnalyticsSummary:
        """Summarize category counts and the latest articles."""
        categories, recent = await asyncio.gather(
            self._client.get_categories(),
            self._client.get_latest(limit=self._pool_size),
        )
        return self._aggregator.summarize(categories, recent, now=now)

    # -- Bookmarks --

    def get_bookmarks(self) -> list[Article]:
        if self._bookmarks is None:
            return []
        return self._bookmarks.load()

    def is_bookmarked(self, url: str) -> bool:
        return self._bookmarks is not None and self._bookmarks.is_bookmarked(url)

    def toggle_bookmark(self, article: Article) -> bool:
        """Bookmark or un-bookmark ``article``.

        Returns:
            True if the article is bookmarked afterwards.
        """
        if self._bookmarks is None:
            logger.warning("Bookmarks are disabled; ignoring toggle for %s", article.url)
            return False
        return self._bookmarks.toggle(article)

    def clear_bookmarks(self) -> bool:
        return self._bookmarks is None or self._bookmarks.clear()
