"""Core data models for CryptoTracker."""

from dataclasses import dataclass, field
from enum import StrEnum


class SearchStatus(StrEnum):
    """Lifecycle states of a search session."""

    IDLE = "idle"
    SEARCHING = "searching"
    RESULTS = "results"
    NO_RESULTS = "no_results"
    ERROR = "error"


@dataclass(frozen=True)
class SearchResult:
    """A coin returned by the remote search endpoint.

    ``id`` is the stable key used for keyboard navigation and for
    deduplicating the recent-searches list.
    """

    id: str
    name: str
    symbol: str
    rank: int | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class Article:
    """A news article. ``url`` is its natural key."""

    title: str
    url: str
    source: str = "Unknown"
    published_at: str | None = None
    category: str = "general"
    description: str | None = None


@dataclass(frozen=True)
class Category:
    """A news category with the article count reported by the backend."""

    name: str
    count: int = 0


@dataclass(frozen=True)
class NewsPage:
    """One page of the news listing."""

    articles: tuple[Article, ...] = ()
    page: int = 1
    total_pages: int = 1


@dataclass(frozen=True)
class CacheEntry:
    """A cached value stamped with the wall-clock time it was stored."""

    value: object
    stored_at: float


@dataclass(frozen=True)
class SourceCount:
    """Number of recent articles published by one source."""

    source: str
    count: int


@dataclass(frozen=True)
class CategoryShare:
    """A category's share of all reported articles.

    ``percentage`` is formatted to one decimal place, e.g. ``"25.0"``, or is
    ``"0"`` when no articles are reported at all.
    """

    name: str
    count: int
    percentage: str


@dataclass(frozen=True)
class AnalyticsSummary:
    """Summary statistics derived from the news feed."""

    total_articles: int = 0
    last_24h_count: int = 0
    top_sources: tuple[SourceCount, ...] = ()
    category_distribution: tuple[CategoryShare, ...] = ()


@dataclass(frozen=True)
class SearchState:
    """Snapshot of a search session, delivered to subscribers.

    ``query`` is the query that ``status`` and ``results`` belong to.
    """

    query: str = ""
    status: SearchStatus = SearchStatus.IDLE
    results: tuple[SearchResult, ...] = ()
    selected_index: int = -1
    error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status == SearchStatus.SEARCHING

    @property
    def selected(self) -> SearchResult | None:
        if 0 <= self.selected_index < len(self.results):
            return self.results[self.selected_index]
        return None


@dataclass
class SessionStats:
    """Counters for a search session, useful for logging and tests."""

    dispatched: int = 0
    applied: int = 0
    discarded: int = 0
    failed: int = 0
    queries: list[str] = field(default_factory=list)
