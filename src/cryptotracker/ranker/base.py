"""Protocol for article ranking."""

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from cryptotracker.data import Article


class ArticleRanker(Protocol):
    """Interface for ordering candidate articles."""

    def rank(
        self,
        candidates: list[Article],
        keywords: Iterable[str],
        limit: int,
        *,
        now: datetime | None = None,
    ) -> list[Article]:
        """Select the top articles for the given keywords.

        Args:
            candidates: Articles to rank.
            keywords: Keywords that mark an article as relevant.
            limit: Maximum number of articles to return.
            now: Reference time for time-dependent scoring.

        Returns:
            Ranked list of at most ``limit`` articles.
        """
        ...
