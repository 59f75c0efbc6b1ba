"""Configuration models for the scraper."""

from typing import Any

from pydantic import BaseModel, Field


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/109.0.0.0 Safari/537.36"
)


class HttpConfig(BaseModel):
    """HTTP client configuration."""

    timeout: float = Field(default=15.0, ge=1.0)
    headers: dict[str, str] = Field(default_factory=lambda: {"User-Agent": DEFAULT_USER_AGENT})
    follow_redirects: bool = Field(default=True)


class RetryConfig(BaseModel):
    """Retry configuration."""

    max_attempts: int = Field(default=2, ge=1, le=10)
    backoff_multiplier: float = Field(default=2.0, ge=1.0)
    initial_delay: float = Field(default=0.5, ge=0.0)


class EngineConfig(BaseModel):
    """Resolution engine configuration."""

    max_workers: int = Field(default=1, ge=1, le=16)


class ScraperConfig(BaseModel):
    """Top-level scraper configuration."""

    http: HttpConfig = Field(default_factory=HttpConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @classmethod
    def from_yaml(cls, data: dict[str, Any] | None) -> "ScraperConfig":
        """Create config from parsed YAML data."""
        data = data or {}
        config_data: dict[str, Any] = {}

        if "http" in data:
            http = dict(data["http"] or {})
            # Headers given in YAML extend the defaults instead of replacing them
            headers = HttpConfig().headers
            headers.update(http.pop("headers", None) or {})
            config_data["http"] = HttpConfig(headers=headers, **http)
        if "retry" in data:
            config_data["retry"] = RetryConfig(**(data["retry"] or {}))
        if "engine" in data:
            config_data["engine"] = EngineConfig(**(data["engine"] or {}))

        return cls(**config_data)

