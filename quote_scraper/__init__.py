"""Best-effort stock quote scraping across several public sites."""

from .errors import (
    ExchangeMissing,
    FetchFailed,
    NotFound,
    ReadFailed,
    ScrapeError,
    SelectorSyntaxError,
    UnsupportedAttribute,
)
from .models import AttributeId, AttributeResult, ResolutionMap, Stock
from .scraper import QuoteScraper, format_quote, get_attributes, get_quote

__all__ = [
    "AttributeId",
    "AttributeResult",
    "ExchangeMissing",
    "FetchFailed",
    "NotFound",
    "QuoteScraper",
    "ReadFailed",
    "ResolutionMap",
    "ScrapeError",
    "SelectorSyntaxError",
    "Stock",
    "UnsupportedAttribute",
    "format_quote",
    "get_attributes",
    "get_quote",
]
