"""Recently-used and bookmarked items."""

from cryptotracker.recent.bookmarks import BOOKMARKS_KEY, BookmarkStore
from cryptotracker.recent.store import RecencyStore

__all__ = [
    "BOOKMARKS_KEY",
    "BookmarkStore",
    "RecencyStore",
]
