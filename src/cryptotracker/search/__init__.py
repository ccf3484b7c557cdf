"""Coin search."""

from cryptotracker.search.client import SEARCH_PATH, SearchClient, parse_search_results
from cryptotracker.search.session import RECENT_SEARCHES_KEY, SearchSession

__all__ = [
    "RECENT_SEARCHES_KEY",
    "SEARCH_PATH",
    "SearchClient",
    "SearchSession",
    "parse_search_results",
]
