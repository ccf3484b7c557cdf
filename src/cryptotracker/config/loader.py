"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from cryptotracker.config.models import TrackerConfig


def load_config(path: Path | str) -> TrackerConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file. An empty file yields the defaults.

    Returns:
        Validated TrackerConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    return TrackerConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).resolve().parents[3] / "configs" / "default.yaml"
