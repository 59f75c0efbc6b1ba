"""Single-source attribute resolution."""

import logging
from collections.abc import Iterable
from typing import Protocol

from bs4 import BeautifulSoup

from quote_scraper.errors import ExchangeMissing, NotFound, SelectorSyntaxError, UnsupportedAttribute
from quote_scraper.fetchers.extractor import extract_field
from quote_scraper.models.result import AttributeResult, ResolutionMap
from quote_scraper.models.source import SourceDescriptor
from quote_scraper.models.stock import AttributeId, Stock


logger = logging.getLogger(__name__)


class DocumentProvider(Protocol):
    """Anything that turns a URL into a parsed document."""

    def fetch(self, url: str) -> BeautifulSoup: ...


def resolve_from_source(
    stock: Stock,
    source: SourceDescriptor,
    attributes: Iterable[AttributeId],
    provider: DocumentProvider,
) -> ResolutionMap:
    """Resolve the requested attributes from one source.

    The source page is fetched once and every requested attribute is
    extracted from that one document. Per-attribute failures are recorded
    in the returned map.

    Raises:
        ExchangeMissing: If the source needs an exchange the stock lacks
        FetchFailed: If the page could not be fetched
        ReadFailed: If the page body could not be read
    """
    if source.needs_exchange and not stock.exchange:
        raise ExchangeMissing(source.name, stock.ticker)

    url = source.build_url(stock)
    document = provider.fetch(url)

    results: ResolutionMap = {}
    for attribute_id in attributes:
        rule = source.rules.get(attribute_id)
        if rule is None:
            results[attribute_id] = AttributeResult.failure(
                UnsupportedAttribute(source.name, attribute_id.value)
            )
            continue

        try:
            value = extract_field(document, rule.selectors(stock), rule.transform)
        except SelectorSyntaxError as e:
            logger.warning(f"{source.name}/{attribute_id.value}: {e}")
            results[attribute_id] = AttributeResult.failure(e)
        except NotFound as e:
            logger.debug(f"{source.name}/{attribute_id.value} not found for {stock}")
            results[attribute_id] = AttributeResult.failure(e)
        else:
            logger.debug(f"{source.name}/{attribute_id.value} = {value!r} for {stock}")
            results[attribute_id] = AttributeResult.success(value)

    return results
