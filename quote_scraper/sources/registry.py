"""Registered quote sources.

Adding a source means adding a descriptor here; the resolution engine
needs no changes.
"""

from quote_scraper.models.source import AttributeRule, SourceDescriptor, SourceId
from quote_scraper.models.stock import AttributeId, Stock

from .transforms import (
    exchange_qualified_url,
    identity,
    parenthesized,
    strip_currency,
    ticker_path_url,
)


def _fixed(*selectors: str):
    """Selector provider that ignores the stock."""

    def provide(stock: Stock) -> list[str]:
        return list(selectors)

    return provide


def _yahoo_pct_change_selectors(stock: Stock) -> list[str]:
    return [
        f'fin-streamer[data-field="regularMarketChangePercent"][data-symbol="{stock.ticker}"]',
    ]


YAHOO = SourceDescriptor(
    id=SourceId.YAHOO,
    base_url="https://finance.yahoo.com/quote/",
    url_builder=ticker_path_url,
    rules={
        AttributeId.PRICE: AttributeRule(
            attribute_id=AttributeId.PRICE,
            selector_provider=_fixed(r"fin-streamer.Fw\(b\).Fz\(36px\).Mb\(-4px\).D\(ib\)"),
            transform=strip_currency,
        ),
        AttributeId.PCT_CHANGE: AttributeRule(
            attribute_id=AttributeId.PCT_CHANGE,
            selector_provider=_yahoo_pct_change_selectors,
            transform=parenthesized,
        ),
    },
)

SEEKING_ALPHA = SourceDescriptor(
    id=SourceId.SEEKING_ALPHA,
    base_url="https://seekingalpha.com/symbol/",
    url_builder=ticker_path_url,
    rules={
        AttributeId.PRICE: AttributeRule(
            attribute_id=AttributeId.PRICE,
            selector_provider=_fixed('[data-test-id="symbol-price"]'),
            transform=strip_currency,
        ),
        AttributeId.PCT_CHANGE: AttributeRule(
            attribute_id=AttributeId.PCT_CHANGE,
            selector_provider=_fixed('[data-test-id="symbol-change"]'),
            transform=parenthesized,
        ),
    },
)

GOOGLE_FINANCE = SourceDescriptor(
    id=SourceId.GOOGLE_FINANCE,
    base_url="https://www.google.com/finance/quote/",
    url_builder=exchange_qualified_url(SourceId.GOOGLE_FINANCE.value),
    needs_exchange=True,
    rules={
        AttributeId.PRICE: AttributeRule(
            attribute_id=AttributeId.PRICE,
            selector_provider=_fixed("div.YMlKec.fxKbKc"),
            transform=strip_currency,
        ),
        AttributeId.PCT_CHANGE: AttributeRule(
            attribute_id=AttributeId.PCT_CHANGE,
            selector_provider=_fixed('div.yWOrNb span[jsname="Fe7oBc"].NydbP div.JwB6zf'),
            transform=identity,
        ),
    },
)

SOURCES: tuple[SourceDescriptor, ...] = (YAHOO, SEEKING_ALPHA, GOOGLE_FINANCE)


def get_source(source_id: SourceId | str) -> SourceDescriptor:
    """Look up a registered source by id or name."""
    source_id = SourceId(source_id)
    for source in SOURCES:
        if source.id == source_id:
            return source
    raise KeyError(f"Source not registered: {source_id.value}")
