"""Article ranking."""

from cryptotracker.ranker.base import ArticleRanker
from cryptotracker.ranker.trending import (
    DEFAULT_TRENDING_KEYWORDS,
    TrendingRanker,
    keyword_matches,
    recency_boost,
)

__all__ = [
    "ArticleRanker",
    "DEFAULT_TRENDING_KEYWORDS",
    "TrendingRanker",
    "keyword_matches",
    "recency_boost",
]
