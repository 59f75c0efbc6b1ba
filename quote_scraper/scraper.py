"""Caller-facing quote scraping API."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from quote_scraper.engine.resolver import DocumentProvider
from quote_scraper.engine.robust import Shuffler, resolve_all
from quote_scraper.fetchers.client import DocumentClient
from quote_scraper.models.config import ScraperConfig
from quote_scraper.models.result import ResolutionMap
from quote_scraper.models.source import SourceDescriptor
from quote_scraper.models.stock import AttributeId, Stock
from quote_scraper.sources.registry import SOURCES


logger = logging.getLogger(__name__)

PLACEHOLDER = "?"
QUOTE_ATTRIBUTES = (AttributeId.PRICE, AttributeId.PCT_CHANGE)


def format_quote(ticker: str, resolution: ResolutionMap) -> str:
    """Format ``"{ticker}: {price} ({pct_change})"``, using "?" for anything missing."""
    values = []
    for attribute_id in QUOTE_ATTRIBUTES:
        result = resolution.get(attribute_id)
        values.append(result.value_or(PLACEHOLDER) if result is not None else PLACEHOLDER)
    price, pct_change = values
    return f"{ticker}: {price} ({pct_change})"


class QuoteScraper:
    """Resolves stock attributes from the registered quote sources.

    Owns a document client unless one is supplied.
    """

    def __init__(
        self,
        config: ScraperConfig | None = None,
        *,
        sources: Sequence[SourceDescriptor] = SOURCES,
        provider: DocumentProvider | None = None,
        rng: Shuffler | None = None,
    ):
        self.config = config or ScraperConfig()
        self.sources = tuple(sources)
        self.rng = rng
        self._owns_provider = provider is None
        self.provider = provider if provider is not None else DocumentClient(self.config)

    def close(self) -> None:
        """Close the document client if this scraper created it."""
        if self._owns_provider and isinstance(self.provider, DocumentClient):
            self.provider.close()

    def __enter__(self) -> "QuoteScraper":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def resolve(
        self,
        stock: Stock,
        attributes: Iterable[AttributeId] | None = None,
    ) -> ResolutionMap:
        """Resolve attributes for ``stock`` (default: every known attribute)."""
        if attributes is None:
            attributes = list(AttributeId)
        return resolve_all(
            stock,
            self.sources,
            attributes,
            self.provider,
            rng=self.rng,
            max_workers=self.config.engine.max_workers,
        )

    def quote(self, stock: Stock) -> str:
        """Return the price and percent change line for ``stock``."""
        return format_quote(stock.ticker, self.resolve(stock, QUOTE_ATTRIBUTES))


def get_attributes(
    ticker: str,
    exchange: str | None = None,
    attributes: Iterable[AttributeId] | None = None,
    *,
    config: ScraperConfig | None = None,
) -> ResolutionMap:
    """Resolve attributes for one ticker with a short-lived scraper."""
    with QuoteScraper(config) as scraper:
        return scraper.resolve(Stock(ticker=ticker, exchange=exchange), attributes)


def get_quote(
    ticker: str,
    exchange: str | None = None,
    *,
    config: ScraperConfig | None = None,
) -> str:
    """Return the formatted quote line for one ticker."""
    with QuoteScraper(config) as scraper:
        return scraper.quote(Stock(ticker=ticker, exchange=exchange))
