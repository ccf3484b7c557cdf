"""Error taxonomy for CryptoTracker."""

NETWORK_ERROR = "Network error. Please check your connection."
TIMEOUT_ERROR = "Request timeout. Please try again."
RATE_LIMIT_ERROR = "Rate limit exceeded. Please wait before making more requests."
SERVER_ERROR = "Server error. Please try again later."
UNKNOWN_ERROR = "An unexpected error occurred."
INVALID_RESPONSE = "Invalid response format"


class CryptoTrackerError(Exception):
    """Base exception for CryptoTracker errors.

    Args:
        message: Human-readable message suitable for display.
        status: HTTP status code, when the error came from a response.
    """

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class TransportError(CryptoTrackerError):
    """Raised when the backend is unreachable or the request timed out."""

    pass


class ProtocolError(CryptoTrackerError):
    """Raised on a non-2xx status or a ``success: false`` payload."""

    pass


class ParseError(CryptoTrackerError):
    """Raised when a response body is not JSON or has the wrong shape."""

    pass


class StorageError(CryptoTrackerError):
    """Raised by storage backends on quota, I/O or corruption failures."""

    pass


def describe_status(status: int, detail: str | None = None, default: str = "Request failed") -> str:
    """Map an HTTP status to a message for the user.

    Args:
        status: HTTP status code.
        detail: ``message`` or ``detail`` field from the response body, if any.
        default: Fallback detail for 400/404 when the body carries none.
    """
    message = detail or default
    if status == 400:
        return f"Bad Request: {message}"
    if status == 404:
        return f"Not Found: {message}"
    if status == 429:
        return RATE_LIMIT_ERROR
    if status == 500:
        return SERVER_ERROR
    return UNKNOWN_ERROR
