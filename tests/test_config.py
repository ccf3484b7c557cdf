"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from cryptotracker.config import (
    FileStorageConfig,
    LoggingConfig,
    MemoryStorageConfig,
    NewsConfig,
    SearchConfig,
    TrackerConfig,
    TransportConfig,
    create_fetcher,
    create_from_config,
    create_news_service,
    create_search_session,
    create_storage,
    get_default_config_path,
    load_config,
)
from cryptotracker.data import Article
from cryptotracker.news import NewsService
from cryptotracker.ranker import DEFAULT_TRENDING_KEYWORDS
from cryptotracker.search import SearchSession
from cryptotracker.storage import InMemoryStorage, JsonFileStorage
from cryptotracker.transport import HttpFetcher


def _write_yaml(content: str) -> Path:
    with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(content)
        f.flush()
        return Path(f.name)


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_transport_defaults(self) -> None:
        config = TransportConfig()
        assert config.base_url == "http://localhost:8000"
        assert config.timeout_seconds == 30.0

    def test_search_defaults(self) -> None:
        config = SearchConfig()
        assert config.min_query_length == 2
        assert config.debounce_ms == 300
        assert config.recent_limit == 5
        assert config.cache_enabled

    def test_news_defaults(self) -> None:
        config = NewsConfig()
        assert config.trending_pool_size == 50
        assert config.bookmark_limit == 100
        assert config.trending_keywords == DEFAULT_TRENDING_KEYWORDS

    def test_root_defaults(self) -> None:
        config = TrackerConfig()
        assert isinstance(config.storage, MemoryStorageConfig)
        assert config.logging.level == "INFO"

    def test_storage_discriminator(self) -> None:
        config = TrackerConfig.model_validate({"storage": {"type": "file", "path": "x.json"}})
        assert isinstance(config.storage, FileStorageConfig)
        assert config.storage.path == "x.json"

    def test_unknown_storage_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TrackerConfig.model_validate({"storage": {"type": "redis"}})

    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchConfig(recent_limit=0)
        with pytest.raises(ValidationError):
            TransportConfig(timeout_seconds=0)

    def test_frozen(self) -> None:
        config = SearchConfig()
        with pytest.raises(ValidationError):
            config.debounce_ms = 10  # type: ignore[misc]


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config(self) -> None:
        path = _write_yaml(
            """
transport:
  base_url: https://api.example.com
  timeout_seconds: 5
storage:
  type: memory
  quota_bytes: 1024
search:
  debounce_ms: 150
news:
  trending_keywords: [solana, sol]
  user_id: alice
logging:
  level: DEBUG
"""
        )
        config = load_config(path)

        assert config.transport.base_url == "https://api.example.com"
        assert isinstance(config.storage, MemoryStorageConfig)
        assert config.storage.quota_bytes == 1024
        assert config.search.debounce_ms == 150
        assert config.search.min_query_length == 2
        assert config.news.trending_keywords == ("solana", "sol")
        assert config.news.user_id == "alice"
        assert config.logging.level == "DEBUG"

    def test_load_empty_file_gives_defaults(self) -> None:
        assert load_config(_write_yaml("")) == TrackerConfig()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_get_default_config_path(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert "configs" in str(path)

    def test_load_default_config(self) -> None:
        path = get_default_config_path()
        if path.exists():
            config = load_config(path)
            assert isinstance(config, TrackerConfig)
            assert isinstance(config.storage, FileStorageConfig)


class TestFactoryFunctions:
    """Tests for component factory functions."""

    def test_create_storage_memory(self) -> None:
        assert isinstance(create_storage(MemoryStorageConfig()), InMemoryStorage)

    def test_create_storage_file(self, tmp_path: Path) -> None:
        storage = create_storage(FileStorageConfig(path=str(tmp_path / "store.json")))
        assert isinstance(storage, JsonFileStorage)

    def test_create_storage_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown storage config type"):
            create_storage(TransportConfig())  # type: ignore[arg-type]

    def test_create_fetcher(self) -> None:
        assert isinstance(create_fetcher(TransportConfig()), HttpFetcher)

    def test_create_search_session(self) -> None:
        session = create_search_session(SearchConfig(), InMemoryStorage(), MagicMock())
        assert isinstance(session, SearchSession)
        assert session.get_recent() == []

    def test_create_news_service(self) -> None:
        service = create_news_service(
            NewsConfig(trending_keywords=("doge",)), InMemoryStorage(), MagicMock()
        )
        assert isinstance(service, NewsService)
        assert service.keywords == ("doge",)

    def test_create_from_config_shares_storage(self) -> None:
        storage = InMemoryStorage()
        session, news = create_from_config(TrackerConfig(), storage=storage, fetcher=MagicMock())
        assert isinstance(session, SearchSession)
        assert isinstance(news, NewsService)

        news.toggle_bookmark(Article(title="t", url="https://example.com/t"))
        assert any(key.startswith("cryptotracker_news_bookmarks") for key in storage.keys())

    def test_create_from_config_builds_components(self, tmp_path: Path) -> None:
        config = TrackerConfig(storage=FileStorageConfig(path=str(tmp_path / "s.json")))
        session, news = create_from_config(config)
        assert isinstance(session, SearchSession)
        assert isinstance(news, NewsService)

    def test_logging_config_defaults(self) -> None:
        config = LoggingConfig()
        assert config.format == "%(message)s"
