"""Shared fixtures: offline document providers and hand-built sources."""

from collections.abc import Callable

import pytest
from bs4 import BeautifulSoup

from quote_scraper.errors import ScrapeError
from quote_scraper.models import AttributeId, AttributeRule, SourceDescriptor, SourceId, Stock
from quote_scraper.sources.transforms import exchange_qualified_url, identity, ticker_path_url


class StubProvider:
    """Serves canned HTML per URL and counts fetches."""

    def __init__(self, pages: dict[str, str | ScrapeError] | None = None):
        self.pages = dict(pages or {})
        self.fetched: list[str] = []

    @property
    def fetch_count(self) -> int:
        return len(self.fetched)

    def fetch(self, url: str) -> BeautifulSoup:
        self.fetched.append(url)
        page = self.pages.get(url, "<html><body></body></html>")
        if isinstance(page, ScrapeError):
            raise page
        return BeautifulSoup(page, "html.parser")


class FixedOrder:
    """Stand-in for ``random`` that applies a predetermined permutation."""

    def __init__(self, order: list[int]):
        self.order = order

    def shuffle(self, x: list[int]) -> None:
        x[:] = [x[i] for i in self.order]


def make_source(
    source_id: SourceId,
    rules: dict[AttributeId, list[str]],
    *,
    needs_exchange: bool = False,
    transform: Callable[[str], str] = identity,
) -> SourceDescriptor:
    base_url = f"https://{source_id.value.lower()}.test/quote/"
    url_builder = exchange_qualified_url(source_id.value) if needs_exchange else ticker_path_url
    return SourceDescriptor(
        id=source_id,
        base_url=base_url,
        url_builder=url_builder,
        needs_exchange=needs_exchange,
        rules={
            attribute_id: AttributeRule(
                attribute_id=attribute_id,
                selector_provider=lambda stock, selectors=selectors: list(selectors),
                transform=transform,
            )
            for attribute_id, selectors in rules.items()
        },
    )


@pytest.fixture
def goog() -> Stock:
    return Stock(ticker="GOOG", exchange="NASDAQ")


@pytest.fixture
def price_source() -> SourceDescriptor:
    return make_source(SourceId.YAHOO, {AttributeId.PRICE: ["#price"]})


@pytest.fixture
def change_source() -> SourceDescriptor:
    return make_source(SourceId.SEEKING_ALPHA, {AttributeId.PCT_CHANGE: ["#change"]})


@pytest.fixture
def split_provider(goog, price_source, change_source) -> StubProvider:
    """Provider where one source has the price and the other the change."""
    return StubProvider({
        price_source.build_url(goog): '<div id="price">101.50</div>',
        change_source.build_url(goog): '<div id="change">+1.2%</div>',
    })
