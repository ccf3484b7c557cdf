"""Configuration module for CryptoTracker."""

from cryptotracker.config.factory import (
    configure_logging,
    create_fetcher,
    create_from_config,
    create_news_service,
    create_search_session,
    create_storage,
)
from cryptotracker.config.loader import get_default_config_path, load_config
from cryptotracker.config.models import (
    FileStorageConfig,
    LoggingConfig,
    MemoryStorageConfig,
    NewsConfig,
    SearchConfig,
    StorageConfig,
    TrackerConfig,
    TransportConfig,
)

__all__ = [
    "FileStorageConfig",
    "LoggingConfig",
    "MemoryStorageConfig",
    "NewsConfig",
    "SearchConfig",
    "StorageConfig",
    "TrackerConfig",
    "TransportConfig",
    "configure_logging",
    "create_fetcher",
    "create_from_config",
    "create_news_service",
    "create_search_session",
    "create_storage",
    "get_default_config_path",
    "load_config",
]
