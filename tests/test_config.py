"""Configuration loading tests."""

import pytest
from pydantic import ValidationError

from quote_scraper import config as config_module
from quote_scraper.config import load_scraper_config
from quote_scraper.models.config import DEFAULT_USER_AGENT, ScraperConfig


def test_defaults():
    config = ScraperConfig()
    assert config.engine.max_workers == 1
    assert config.http.headers["User-Agent"] == DEFAULT_USER_AGENT


def test_from_yaml_merges_headers():
    config = ScraperConfig.from_yaml({
        "http": {"timeout": 5, "headers": {"Accept-Language": "en-US"}},
        "engine": {"max_workers": 3},
    })
    assert config.http.timeout == 5
    assert config.http.headers["User-Agent"] == DEFAULT_USER_AGENT
    assert config.http.headers["Accept-Language"] == "en-US"
    assert config.engine.max_workers == 3
    assert config.retry.max_attempts == 2


def test_from_yaml_validates():
    with pytest.raises(ValidationError):
        ScraperConfig.from_yaml({"engine": {"max_workers": 0}})


def test_load_explicit_path(tmp_path):
    path = tmp_path / "scraper.yaml"
    path.write_text("retry:\n  max_attempts: 4\n", encoding="utf-8")
    assert load_scraper_config(path).retry.max_attempts == 4


def test_load_empty_file(tmp_path):
    path = tmp_path / "scraper.yaml"
    path.write_text("", encoding="utf-8")
    assert load_scraper_config(path) == ScraperConfig()


def test_load_explicit_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scraper_config(tmp_path / "nope.yaml")


def test_load_default_falls_back(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path)
    assert load_scraper_config() == ScraperConfig()

    (tmp_path / "scraper.yaml").write_text("engine:\n  max_workers: 2\n", encoding="utf-8")
    assert load_scraper_config().engine.max_workers == 2


def test_sample_config_is_valid():
    data = config_module._read_yaml(config_module.CONFIG_DIR / "scraper.sample.yaml")
    config = ScraperConfig.from_yaml(data)
    assert config.http.headers["Accept-Language"] == "en-US,en;q=0.9"
