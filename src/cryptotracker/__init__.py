"""CryptoTracker core: incremental coin search and news ranking."""

from cryptotracker.analytics import AnalyticsAggregator
from cryptotracker.cache import TTLCache, make_cache_key
from cryptotracker.config import TrackerConfig, create_from_config, load_config
from cryptotracker.data import (
    AnalyticsSummary,
    Article,
    CacheEntry,
    Category,
    CategoryShare,
    NewsPage,
    SearchResult,
    SearchState,
    SearchStatus,
    SessionStats,
    SourceCount,
)
from cryptotracker.dates import parse_timestamp, time_ago
from cryptotracker.debounce import Debouncer
from cryptotracker.errors import (
    CryptoTrackerError,
    ParseError,
    ProtocolError,
    StorageError,
    TransportError,
    describe_status,
)
from cryptotracker.news import NewsClient, NewsService
from cryptotracker.ranker import ArticleRanker, TrendingRanker
from cryptotracker.recent import BookmarkStore, RecencyStore
from cryptotracker.search import SearchClient, SearchSession
from cryptotracker.storage import InMemoryStorage, JsonFileStorage, KeyValueStorage
from cryptotracker.transport import Fetcher, HttpFetcher

__all__ = [
    # Models
    "AnalyticsSummary",
    "Article",
    "CacheEntry",
    "Category",
    "CategoryShare",
    "NewsPage",
    "SearchResult",
    "SearchState",
    "SearchStatus",
    "SessionStats",
    "SourceCount",
    # Errors
    "CryptoTrackerError",
    "ParseError",
    "ProtocolError",
    "StorageError",
    "TransportError",
    "describe_status",
    # Functions
    "make_cache_key",
    "parse_timestamp",
    "time_ago",
    # Protocols
    "ArticleRanker",
    "Fetcher",
    "KeyValueStorage",
    # Storage & transport
    "HttpFetcher",
    "InMemoryStorage",
    "JsonFileStorage",
    # Building blocks
    "BookmarkStore",
    "Debouncer",
    "RecencyStore",
    "TTLCache",
    # Search
    "SearchClient",
    "SearchSession",
    # News
    "AnalyticsAggregator",
    "NewsClient",
    "NewsService",
    "TrendingRanker",
    # Config
    "TrackerConfig",
    "create_from_config",
    "load_config",
]
