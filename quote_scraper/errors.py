"""Scrape error taxonomy.

Whole-source errors (``FetchFailed``, ``ReadFailed``, ``ExchangeMissing``)
abort a single source visit. The remaining kinds are recorded per attribute.
"""


class ScrapeError(Exception):
    """Base class for every failure raised while scraping a source."""

    kind = "scrape_error"

    def __init__(self, message: str, *, url: str | None = None):
        super().__init__(message)
        self.url = url


class FetchFailed(ScrapeError):
    """The request for a source page could not be sent or was rejected."""

    kind = "fetch_failed"


class ReadFailed(ScrapeError):
    """The response body of a source page could not be read."""

    kind = "read_failed"


class ExchangeMissing(ScrapeError):
    """The stock has no exchange but the source requires one."""

    kind = "exchange_missing"

    def __init__(self, source: str, ticker: str):
        super().__init__(
            f"Exchange not provided for {ticker}; {source} requires an exchange "
            f"(e.g. NYSE, NASDAQ)"
        )
        self.source = source
        self.ticker = ticker


class SelectorSyntaxError(ScrapeError):
    """A configured selector could not be parsed."""

    kind = "selector_syntax_error"

    def __init__(self, selector: str, reason: str = ""):
        message = f"Failed to parse selector {selector!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.selector = selector


class UnsupportedAttribute(ScrapeError):
    """The source has no extraction rule for the requested attribute."""

    kind = "unsupported_attribute"

    def __init__(self, source: str, attribute: str):
        super().__init__(f"{source} has no rule for attribute {attribute!r}")
        self.source = source
        self.attribute = attribute


class NotFound(ScrapeError):
    """No candidate selector matched the document."""

    kind = "not_found"

    def __init__(self, message: str = "No match found", *, selectors: list[str] | None = None):
        super().__init__(message)
        self.selectors = list(selectors or [])
