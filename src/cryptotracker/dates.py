"""Timestamp parsing and relative time labels."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

logger = logging.getLogger(__name__)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp into an aware UTC datetime.

    Args:
        value: Timestamp such as "2026-02-01T10:00:00Z". Naive timestamps are
            taken to be UTC.

    Returns:
        The parsed datetime, or None if ``value`` is empty, not a string or
        unparsable.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        logger.debug(f"Unparsable timestamp: {value!r}")
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'} ago"


def time_ago(published_at: str | None, now: datetime | None = None) -> str:
    """Describe how long ago ``published_at`` was, e.g. "3 hours ago".

    Returns "Recently" for a missing or unparsable timestamp.
    """
    published = parse_timestamp(published_at)
    if published is None:
        return "Recently"
    now = now or utc_now()
    hours = int((now - published).total_seconds() // 3600)
    days = hours // 24

    if hours < 1:
        return "Less than an hour ago"
    if hours < 24:
        return _plural(hours, "hour")
    if days < 7:
        return _plural(days, "day")
    return _plural(days // 7, "week")
