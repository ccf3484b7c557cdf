"""Summary statistics over the news feed."""

import logging
from datetime import datetime, timedelta

from cryptotracker.data import AnalyticsSummary, Article, Category, CategoryShare, SourceCount
from cryptotracker.dates import parse_timestamp, utc_now

logger = logging.getLogger(__name__)

UNKNOWN_SOURCE = "Unknown"


def format_percentage(count: int, total: int) -> str:
    """Format ``count / total`` as a percentage with one decimal place.

    A zero total gives "0" rather than dividing by zero. Negative counts are
    treated as zero.
    """
    if total <= 0:
        return "0"
    return f"{max(count, 0) / total * 100:.1f}"


class AnalyticsAggregator:
    """Derive counts, top sources and category shares from news data.

    Args:
        top_sources_limit: Number of sources reported in ``top_sources`` (default 5).
        window: Trailing window for ``last_24h_count`` (default 24 hours).
    """

    def __init__(
        self,
        *,
        top_sources_limit: int = 5,
        window: timedelta = timedelta(hours=24),
    ) -> None:
        self._top_sources_limit = top_sources_limit
        self._window = window

    def summarize(
        self,
        categories: list[Category],
        recent_articles: list[Article],
        *,
        now: datetime | None = None,
    ) -> AnalyticsSummary:
        """Build an analytics summary.

        Args:
            categories: Categories with their reported article counts.
            recent_articles: Recent articles used for the time and source stats.
            now: Reference time for the trailing window (default: current UTC time).

        Returns:
            AnalyticsSummary with totals, top sources and category distribution.
        """
        now = now or utc_now()
        total = sum(max(c.count, 0) for c in categories)

        return AnalyticsSummary(
            total_articles=total,
            last_24h_count=self._count_recent(recent_articles, now),
            top_sources=tuple(self._top_sources(recent_articles)),
            category_distribution=tuple(
                CategoryShare(
                    name=c.name,
                    count=max(c.count, 0),
                    percentage=format_percentage(c.count, total),
                )
                for c in categories
            ),
        )

    def _count_recent(self, articles: list[Article], now: datetime) -> int:
        """Count articles published within [now - window, now]."""
        start = now - self._window
        count = 0
        for article in articles:
            published = parse_timestamp(article.published_at)
            if published is not None and start <= published <= now:
                count += 1
        return count

    def _top_sources(self, articles: list[Article]) -> list[SourceCount]:
        """Most frequent sources, ties broken by first appearance."""
        counts: dict[str, int] = {}
        for article in articles:
            source = article.source or UNKNOWN_SOURCE
            counts[source] = counts.get(source, 0) + 1

        # dicts preserve insertion order, so the index is the first-seen position
        ordered = sorted(
            enumerate(counts.items()),
            key=lambda item: (-item[1][1], item[0]),
        )
        return [
            SourceCount(source=source, count=count)
            for _, (source, count) in ordered[: self._top_sources_limit]
        ]
