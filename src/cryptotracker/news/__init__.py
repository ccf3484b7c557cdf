"""News feed."""

from cryptotracker.news.client import (
    ALL_CATEGORIES,
    CATEGORIES_PATH,
    LATEST_NEWS_PATH,
    NEWS_PATH,
    NewsClient,
    parse_articles,
    unwrap_envelope,
)
from cryptotracker.news.service import TRENDING_POOL_SIZE, NewsService

__all__ = [
    "ALL_CATEGORIES",
    "CATEGORIES_PATH",
    "LATEST_NEWS_PATH",
    "NEWS_PATH",
    "TRENDING_POOL_SIZE",
    "NewsClient",
    "NewsService",
    "parse_articles",
    "unwrap_envelope",
]
