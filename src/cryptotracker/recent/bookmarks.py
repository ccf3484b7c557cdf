"""Per-user article bookmarks."""

from cryptotracker.data import Article
from cryptotracker.recent.store import RecencyStore
from cryptotracker.storage import KeyValueStorage

BOOKMARKS_KEY = "cryptotracker_news_bookmarks"
DEFAULT_BOOKMARK_LIMIT = 100


class BookmarkStore:
    """Bookmarked articles for one user, newest first, deduplicated by URL.

    Args:
        storage: Backing key/value storage.
        user_id: Owner of the bookmarks; each user gets a separate storage key.
        limit: Maximum bookmarks kept (default 100). Bookmarking past the
            limit drops the oldest bookmark.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        user_id: str = "default",
        *,
        limit: int = DEFAULT_BOOKMARK_LIMIT,
    ) -> None:
        self._user_id = user_id
        self._store: RecencyStore[Article] = RecencyStore(
            storage,
            f"{BOOKMARKS_KEY}:{user_id}",
            item_type=Article,
            key_field="url",
            limit=limit,
        )

    @property
    def user_id(self) -> str:
        return self._user_id

    def load(self) -> list[Article]:
        return self._store.load()

    def add(self, article: Article) -> bool:
        return self._store.record(article)

    def remove(self, url: str) -> bool:
        return self._store.remove(url)

    def is_bookmarked(self, url: str) -> bool:
        return self._store.contains(url)

    def toggle(self, article: Article) -> bool:
        """Bookmark ``article``, or remove it if already bookmarked.

        Returns:
            True if the article is bookmarked afterwards.
        """
        if self.is_bookmarked(article.url):
            self.remove(article.url)
        else:
            self.add(article)
        return self.is_bookmarked(article.url)

    def clear(self) -> bool:
        return self._store.clear()
