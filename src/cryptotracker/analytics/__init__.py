"""News analytics."""

from cryptotracker.analytics.aggregator import (
    UNKNOWN_SOURCE,
    AnalyticsAggregator,
    format_percentage,
)

__all__ = [
    "UNKNOWN_SOURCE",
    "AnalyticsAggregator",
    "format_percentage",
]
