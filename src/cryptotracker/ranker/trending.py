"""Keyword and recency based trending ranker.

Each candidate is scored as

    score(a) = keyword_matches(a) + recency_boost(a)

where ``keyword_matches`` counts the distinct keywords found (case-insensitive,
as substrings) in the article's title and description, and

    recency_boost(a) = max(0, window - age_hours(a)) / window

decays linearly from 1.0 for an article published now to 0.0 for one at
least ``window`` hours old. Articles with no parsable timestamp get no boost.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from cryptotracker.data import Article
from cryptotracker.dates import parse_timestamp, utc_now

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_HOURS = 24.0

DEFAULT_TRENDING_KEYWORDS: tuple[str, ...] = (
    "bitcoin",
    "btc",
    "ethereum",
    "eth",
    "surge",
    "rally",
    "crash",
    "etf",
    "regulation",
    "sec",
    "defi",
    "nft",
    "breaking",
)


def keyword_matches(article: Article, keywords: Iterable[str]) -> int:
    """Count distinct keywords appearing in the article's title or description."""
    text = f"{article.title} {article.description or ''}".lower()
    distinct = {k.strip().lower() for k in keywords if k and k.strip()}
    return sum(1 for keyword in distinct if keyword in text)


def recency_boost(
    article: Article,
    now: datetime,
    window_hours: float = DEFAULT_WINDOW_HOURS,
) -> float:
    """Linear boost in [0.0, 1.0] favouring recently published articles."""
    published = parse_timestamp(article.published_at)
    if published is None:
        return 0.0
    age_hours = (now - published).total_seconds() / 3600
    # Future timestamps count as just published.
    age_hours = max(age_hours, 0.0)
    return max(0.0, window_hours - age_hours) / window_hours


class TrendingRanker:
    """Rank articles by keyword relevance plus a recency bonus.

    Ordering is descending by score. Equal scores keep their input order:
    the sort key carries each candidate's original position, so ties never
    depend on the sort algorithm. Scores live only in a parallel list local
    to ``rank``; the returned articles are the input objects, unchanged.

    Args:
        window_hours: Age at which the recency boost reaches zero (default 24).
    """

    def __init__(self, window_hours: float = DEFAULT_WINDOW_HOURS) -> None:
        if window_hours <= 0:
            raise ValueError(f"window_hours must be positive, got {window_hours}")
        self._window = window_hours

    def score(self, article: Article, keywords: Iterable[str], now: datetime) -> float:
        return keyword_matches(article, keywords) + recency_boost(article, now, self._window)

    def rank(
        self,
        candidates: list[Article],
        keywords: Iterable[str],
        limit: int,
        *,
        now: datetime | None = None,
    ) -> list[Article]:
        """Return at most ``limit`` candidates, highest score first.

        Args:
            candidates: Articles to rank.
            keywords: Keywords that mark an article as relevant.
            limit: Maximum number of articles to return.
            now: Reference time for the recency boost (default: current UTC time).
        """
        if not candidates or limit <= 0:
            return []

        now = now or utc_now()
        keyword_list = list(keywords)
        scored = [
            (self.score(article, keyword_list, now), position)
            for position, article in enumerate(candidates)
        ]
        scored.sort(key=lambda pair: (-pair[0], pair[1]))

        logger.debug(
            "Ranked %d candidates; top score %.3f",
            len(candidates),
            scored[0][0],
        )
        return [candidates[position] for _, position in scored[:limit]]
