"""Configuration loading utilities."""

import logging
from pathlib import Path
from typing import Any

import yaml

from quote_scraper.models.config import ScraperConfig

CONFIG_DIR = Path(__file__).parent

logger = logging.getLogger(__name__)


def load_config(name: str) -> dict[str, Any]:
    """Load a YAML configuration file from the config directory.

    Args:
        name: Config file name without extension (e.g., 'scraper')

    Returns:
        Parsed configuration dictionary

    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the config file is invalid YAML
    """
    config_path = get_config_path(name)
    if not config_path.exists():
        sample_path = CONFIG_DIR / f"{name}.sample.yaml"
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please copy {sample_path} to {config_path} and adjust your values."
        )

    return _read_yaml(config_path)


def get_config_path(name: str) -> Path:
    """Get the path to a configuration file."""
    return CONFIG_DIR / f"{name}.yaml"


def load_scraper_config(path: Path | str | None = None) -> ScraperConfig:
    """Load scraper settings.

    An explicit ``path`` must exist. Without one, ``scraper.yaml`` from the
    config directory is used when present, built-in defaults otherwise.
    """
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        return ScraperConfig.from_yaml(_read_yaml(path))

    try:
        data = load_config("scraper")
    except FileNotFoundError:
        logger.debug("No scraper.yaml found, using default configuration")
        return ScraperConfig()
    return ScraperConfig.from_yaml(data)


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
