"""Data models for stocks, sources and resolution results."""

from .config import EngineConfig, HttpConfig, RetryConfig, ScraperConfig
from .result import AttributeResult, ResolutionMap, coalesce, empty_resolution, is_complete
from .source import AttributeRule, SourceDescriptor, SourceId
from .stock import AttributeId, Stock

__all__ = [
    "AttributeId",
    "AttributeResult",
    "AttributeRule",
    "EngineConfig",
    "HttpConfig",
    "ResolutionMap",
    "RetryConfig",
    "ScraperConfig",
    "SourceDescriptor",
    "SourceId",
    "Stock",
    "coalesce",
    "empty_resolution",
    "is_complete",
]
