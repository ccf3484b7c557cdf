"""Protocol for fetching JSON from the backend."""

from collections.abc import Mapping
from typing import Any, Protocol


class Fetcher(Protocol):
    """Interface for asynchronous JSON fetches.

    Implementations raise ``TransportError``, ``ProtocolError`` or
    ``ParseError`` from ``cryptotracker.errors``; they never return an
    error payload in place of data.
    """

    async def fetch(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``path`` with query ``params`` and return the decoded JSON body.

        Args:
            path: Endpoint path, e.g. "/api/v1/news/latest".
            params: Query string parameters.

        Returns:
            The decoded JSON body.
        """
        ...
