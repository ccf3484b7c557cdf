"""Data models for CryptoTracker."""

from cryptotracker.data.models import (
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

__all__ = [
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
]
