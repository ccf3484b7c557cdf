"""Pydantic configuration models for CryptoTracker components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from cryptotracker.ranker import DEFAULT_TRENDING_KEYWORDS

# ============================================================
# Transport Config
# ============================================================


class TransportConfig(BaseModel):
    """Configuration for the backend HTTP fetcher."""

    base_url: str = "http://localhost:8000"
    timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Storage Configs
# ============================================================


class MemoryStorageConfig(BaseModel):
    """In-memory storage, optionally capped at ``quota_bytes``."""

    type: Literal["memory"] = "memory"
    quota_bytes: int | None = Field(default=None, gt=0)

    model_config = {"frozen": True}


class FileStorageConfig(BaseModel):
    """JSON file storage."""

    type: Literal["file"] = "file"
    path: str = "cryptotracker_storage.json"

    model_config = {"frozen": True}


StorageConfig = Annotated[
    MemoryStorageConfig | FileStorageConfig,
    Field(discriminator="type"),
]


# ============================================================
# Search & News Configs
# ============================================================


class SearchConfig(BaseModel):
    """Configuration for the search session."""

    min_query_length: int = Field(default=2, ge=1)
    debounce_ms: float = Field(default=300, ge=0)
    recent_limit: int = Field(default=5, ge=1)
    cache_enabled: bool = True
    cache_ttl_seconds: float = Field(default=120, gt=0)

    model_config = {"frozen": True}


class NewsConfig(BaseModel):
    """Configuration for news fetching, trending and analytics."""

    cache_enabled: bool = True
    cache_ttl_seconds: float = Field(default=300, gt=0)
    trending_pool_size: int = Field(default=50, ge=1)
    trending_window_hours: float = Field(default=24, gt=0)
    trending_keywords: tuple[str, ...] = DEFAULT_TRENDING_KEYWORDS
    top_sources_limit: int = Field(default=5, ge=1)
    bookmark_limit: int = Field(default=100, ge=1)
    user_id: str = "default"

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for the standard library logger."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: str = "%(message)s"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class TrackerConfig(BaseModel):
    """Root configuration for CryptoTracker."""

    transport: TransportConfig = Field(default_factory=TransportConfig)
    storage: MemoryStorageConfig | FileStorageConfig = Field(
        default_factory=MemoryStorageConfig, discriminator="type"
    )
    search: SearchConfig = Field(default_factory=SearchConfig)
    news: NewsConfig = Field(default_factory=NewsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
