"""Backend fetcher built on httpx."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from cryptotracker.errors import (
    NETWORK_ERROR,
    TIMEOUT_ERROR,
    ParseError,
    ProtocolError,
    TransportError,
    describe_status,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"


class HttpFetcher:
    """Fetch JSON from the CryptoTracker backend over HTTP.

    A fresh ``httpx.AsyncClient`` is opened per request, so the fetcher holds
    no connection state between calls.

    Args:
        base_url: Backend root URL (default "http://localhost:8000").
        timeout: Request timeout in seconds (default 30).
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Raises:
            TransportError: Connection failure or timeout.
            ProtocolError: Non-2xx response.
            ParseError: Body is not valid JSON.
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = await client.get(url, params=dict(params or {}))
            except httpx.TimeoutException as e:
                logger.warning("Timeout fetching %s: %s", url, e)
                raise TransportError(TIMEOUT_ERROR) from e
            except httpx.HTTPError as e:
                logger.warning("Network error fetching %s: %s", url, e)
                raise TransportError(NETWORK_ERROR) from e

            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                message = describe_status(status, _error_detail(e.response))
                logger.warning("HTTP %d from %s", status, url)
                raise ProtocolError(message, status=status) from e

            try:
                return response.json()
            except ValueError as e:
                raise ParseError(f"Malformed JSON from {url}") from e


def _error_detail(response: httpx.Response) -> str | None:
    """Extract ``message`` or ``detail`` from an error body, if it has one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    detail = body.get("message") or body.get("detail")
    return str(detail) if detail else None
