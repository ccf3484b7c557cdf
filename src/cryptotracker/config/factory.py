"""Factory functions to create components from configuration."""

import logging
from pathlib import Path

from cryptotracker.analytics import AnalyticsAggregator
from cryptotracker.cache import TTLCache
from cryptotracker.config.models import (
    FileStorageConfig,
    LoggingConfig,
    MemoryStorageConfig,
    NewsConfig,
    SearchConfig,
    TrackerConfig,
    TransportConfig,
)
from cryptotracker.data import SearchResult
from cryptotracker.news import NewsClient, NewsService
from cryptotracker.ranker import TrendingRanker
from cryptotracker.recent import BookmarkStore, RecencyStore
from cryptotracker.search import RECENT_SEARCHES_KEY, SearchClient, SearchSession
from cryptotracker.storage import InMemoryStorage, JsonFileStorage, KeyValueStorage
from cryptotracker.transport import Fetcher, HttpFetcher

SEARCH_CACHE_NAMESPACE = "cryptotracker_cache:search:"
NEWS_CACHE_NAMESPACE = "cryptotracker_cache:news:"


def create_storage(config: MemoryStorageConfig | FileStorageConfig) -> KeyValueStorage:
    """Create a key/value storage backend from config."""
    if isinstance(config, MemoryStorageConfig):
        return InMemoryStorage(quota_bytes=config.quota_bytes)
    if isinstance(config, FileStorageConfig):
        return JsonFileStorage(Path(config.path))
    msg = f"Unknown storage config type: {type(config)}"
    raise ValueError(msg)


def create_fetcher(config: TransportConfig) -> Fetcher:
    """Create the backend fetcher from config."""
    return HttpFetcher(base_url=config.base_url, timeout=config.timeout_seconds)


def create_search_session(
    config: SearchConfig,
    storage: KeyValueStorage,
    fetcher: Fetcher,
) -> SearchSession:
    """Create a search session with its cache and recent-searches store."""
    cache = (
        TTLCache(config.cache_ttl_seconds, storage=storage, namespace=SEARCH_CACHE_NAMESPACE)
        if config.cache_enabled
        else None
    )
    recent: RecencyStore[SearchResult] = RecencyStore(
        storage,
        RECENT_SEARCHES_KEY,
        item_type=SearchResult,
        key_field="id",
        limit=config.recent_limit,
    )
    return SearchSession(
        SearchClient(fetcher, cache=cache),
        recent,
        min_query_length=config.min_query_length,
        debounce_ms=config.debounce_ms,
    )


def create_news_service(
    config: NewsConfig,
    storage: KeyValueStorage,
    fetcher: Fetcher,
) -> NewsService:
    """Create the news service with its cache, ranker, aggregator and bookmarks."""
    cache = (
        TTLCache(config.cache_ttl_seconds, storage=storage, namespace=NEWS_CACHE_NAMESPACE)
        if config.cache_enabled
        else None
    )
    return NewsService(
        NewsClient(fetcher, cache=cache),
        ranker=TrendingRanker(window_hours=config.trending_window_hours),
        aggregator=AnalyticsAggregator(top_sources_limit=config.top_sources_limit),
        bookmarks=BookmarkStore(storage, config.user_id, limit=config.bookmark_limit),
        keywords=config.trending_keywords,
        pool_size=config.trending_pool_size,
    )


def configure_logging(config: LoggingConfig) -> None:
    """Apply the logging config to the root logger."""
    logging.basicConfig(level=config.level, format=config.format)


def create_from_config(
    config: TrackerConfig,
    *,
    storage: KeyValueStorage | None = None,
    fetcher: Fetcher | None = None,
) -> tuple[SearchSession, NewsService]:
    """Create the search session and news service from root config.

    Args:
        config: Root configuration.
        storage: Storage to use instead of the one described by the config.
        fetcher: Fetcher to use instead of the one described by the config.

    Returns:
        Tuple of (search_session, news_service) sharing one storage and fetcher.
    """
    storage = storage if storage is not None else create_storage(config.storage)
    fetcher = fetcher if fetcher is not None else create_fetcher(config.transport)
    session = create_search_session(config.search, storage, fetcher)
    news = create_news_service(config.news, storage, fetcher)
    return (session, news)
