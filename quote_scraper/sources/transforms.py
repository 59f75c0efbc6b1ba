"""Text cleanup and URL helpers shared by source definitions."""

import re

from quote_scraper.errors import ExchangeMissing
from quote_scraper.models.stock import Stock


# Text inside the last pair of parentheses, e.g. "+1.20 (+0.85%)" -> "+0.85%"
PARENTHESIZED_PATTERN = re.compile(r".*\((.*)\)")


def strip_currency(text: str) -> str:
    """Remove dollar signs from a price."""
    return text.replace("$", "")


def parenthesized(text: str) -> str:
    """Extract the text inside parentheses, or "" if there is none."""
    match = PARENTHESIZED_PATTERN.search(text)
    if match is None:
        return ""
    return match.group(1)


def identity(text: str) -> str:
    return text


def ticker_path_url(base_url: str, stock: Stock) -> str:
    """URL of the form ``{base_url}{ticker}/``."""
    return f"{base_url}{stock.ticker}/"


def exchange_qualified_url(source: str):
    """Build a URL builder for ``{base_url}{ticker}:{exchange}`` pages."""

    def build(base_url: str, stock: Stock) -> str:
        if not stock.exchange:
            raise ExchangeMissing(source, stock.ticker)
        return f"{base_url}{stock.ticker}:{stock.exchange}"

    return build
