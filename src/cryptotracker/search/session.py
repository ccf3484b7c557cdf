"""Search session: debounced querying, race-safe results and keyboard selection."""

import dataclasses
import logging
from collections.abc import Callable
from typing import Any

from cryptotracker.data import SearchResult, SearchState, SearchStatus, SessionStats
from cryptotracker.debounce import Debouncer
from cryptotracker.errors import CryptoTrackerError
from cryptotracker.recent import RecencyStore
from cryptotracker.search.client import SearchClient

logger = logging.getLogger(__name__)

RECENT_SEARCHES_KEY = "cryptotracker_recent_searches"
DEFAULT_MIN_QUERY_LENGTH = 2
DEFAULT_DEBOUNCE_MS = 300

Listener = Callable[[SearchState], None]


class SearchSession:
    """State machine behind the search overlay.

    States: ``idle -> searching -> {results | no_results | error} -> idle``.

    Typing goes through ``set_query``. Queries shorter than
    ``min_query_length`` clear the results at once; longer ones are sent to
    the backend only after the debounce period. Every dispatch takes the
    next sequence number, and a response is applied only while its number
    is still the latest, so a slow reply to an old query can never replace
    the results of a newer one. Clearing the query also advances the
    sequence, which discards any reply still in flight.

    Subscribers receive a fresh ``SearchState`` on every change. Its
    ``query`` changes only when a query is dispatched or the input is
    cleared, so it always names the query the shown status and results
    belong to, even while newer input waits out the debounce period.

    Args:
        client: Remote search client.
        recent: Store of recently selected coins.
        min_query_length: Shortest query sent to the backend (default 2).
        debounce_ms: Quiet period before dispatching (default 300).
        debouncer: Scheduler to use (default: a new ``Debouncer``).
        on_close: Called once when the session ends, with the selected coin
            or None when cancelled.
    """

    def __init__(
        self,
        client: SearchClient,
        recent: RecencyStore[SearchResult],
        *,
        min_query_length: int = DEFAULT_MIN_QUERY_LENGTH,
        debounce_ms: float = DEFAULT_DEBOUNCE_MS,
        debouncer: Debouncer | None = None,
        on_close: Callable[[SearchResult | None], None] | None = None,
    ) -> None:
        self._client = client
        self._recent = recent
        self._min_length = min_query_length
        self._debounce_ms = debounce_ms
        self._debouncer = debouncer or Debouncer()
        self._on_close = on_close
        self._listeners: list[Listener] = []
        self._state = SearchState()
        self._stats = SessionStats()
        self._seq = 0
        self._closed = False

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def stats(self) -> SessionStats:
        return self._stats

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and call it with the current state.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)
        listener(self._state)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- Query input --

    def set_query(self, text: str) -> None:
        """Handle new input text. Must be called from within the event loop."""
        if self._closed:
            return
        if not self._is_searchable(text):
            self._reset(text)
            return
        self._update(selected_index=-1)
        self._debouncer.schedule(lambda: self.search_now(text), self._debounce_ms)

    async def search_now(self, text: str) -> SearchState:
        """Dispatch ``text`` immediately, bypassing the debounce period.

        Returns:
            The session state after the response was handled.
        """
        if self._closed:
            return self._state
        if not self._is_searchable(text):
            self._reset(text)
            return self._state

        query = text.strip()
        self._seq += 1
        seq = self._seq
        self._stats.dispatched += 1
        self._stats.queries.append(query)
        self._update(query=text, status=SearchStatus.SEARCHING, error=None)

        try:
            results = await self._client.search(query)
        except CryptoTrackerError as e:
            if not self._is_current(seq, query):
                return self._state
            logger.warning("Search for '%s' failed: %s", query, e.message)
            self._stats.failed += 1
            self._update(
                status=SearchStatus.ERROR,
                results=(),
                selected_index=-1,
                error=e.message,
            )
            return self._state

        if not self._is_current(seq, query):
            return self._state

        self._stats.applied += 1
        self._update(
            status=SearchStatus.RESULTS if results else SearchStatus.NO_RESULTS,
            results=tuple(results),
            selected_index=-1,
        )
        return self._state

    def clear(self) -> None:
        """Empty the query and the results."""
        if self._closed:
            return
        self._reset("")

    # -- Keyboard navigation --

    def select_next(self) -> int:
        """Move the selection down, stopping at the last result."""
        index = min(self._state.selected_index + 1, len(self._state.results) - 1)
        self._update(selected_index=index)
        return index

    def select_previous(self) -> int:
        """Move the selection up, stopping at -1 (no selection)."""
        index = max(self._state.selected_index - 1, -1)
        self._update(selected_index=index)
        return index

    def commit_selection(self) -> SearchResult | None:
        """Select the highlighted result, if any, and close the session."""
        result = self._state.selected
        if result is None or self._closed:
            return None
        self.select(result)
        return result

    def cancel(self) -> None:
        """Close the session without selecting anything."""
        self._close(None)

    def select(self, result: SearchResult) -> None:
        """Record ``result`` as a recent search and close the session."""
        if self._closed:
            return
        if not self._recent.record(result):
            logger.warning("Recent searches not saved for '%s'", result.id)
        self._close(result)

    def close(self) -> None:
        """Tear down the session; pending and in-flight searches are dropped."""
        self._close(None)

    # -- Recent searches --

    def get_recent(self) -> list[SearchResult]:
        return self._recent.load()

    def record_recent(self, item: SearchResult) -> bool:
        return self._recent.record(item)

    def clear_recent(self) -> bool:
        return self._recent.clear()

    # -- Internals --

    def _is_searchable(self, text: str) -> bool:
        return len(text.strip()) >= self._min_length

    def _is_current(self, seq: int, query: str) -> bool:
        if seq == self._seq and not self._closed:
            return True
        logger.debug("Discarding stale response for '%s' (seq %d < %d)", query, seq, self._seq)
        self._stats.discarded += 1
        return False

    def _reset(self, text: str) -> None:
        self._debouncer.cancel()
        # Supersede any request still in flight.
        self._seq += 1
        self._update(
            query=text,
            status=SearchStatus.IDLE,
            results=(),
            selected_index=-1,
            error=None,
        )

    def _close(self, result: SearchResult | None) -> None:
        if self._closed:
            return
        self._closed = True
        self._seq += 1
        self._debouncer.close()
        self._listeners.clear()
        if self._on_close is not None:
            self._on_close(result)

    def _update(self, **changes: Any) -> None:
        if self._closed:
            return
        self._state = dataclasses.replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)
