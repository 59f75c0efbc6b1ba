"""Field extraction from parsed documents."""

from collections.abc import Callable, Sequence

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError as CssSyntaxError

from quote_scraper.errors import NotFound, SelectorSyntaxError


def select_text(document: BeautifulSoup, selector: str) -> str | None:
    """Return the text content of the first element matching ``selector``.

    Returns None when nothing matches.

    Raises:
        SelectorSyntaxError: If the selector cannot be parsed
    """
    try:
        element = document.select_one(selector)
    except CssSyntaxError as e:
        raise SelectorSyntaxError(selector, str(e)) from e

    if element is None:
        return None
    return element.get_text()


def extract_field(
    document: BeautifulSoup,
    selectors: Sequence[str],
    transform: Callable[[str], str],
) -> str:
    """Extract a value using the first selector that matches.

    Selectors are tried in order. The first match wins even if its text is
    empty. An unparsable selector stops the search, so later selectors in
    the list are not tried.

    Args:
        document: Parsed page
        selectors: Candidate selectors, most specific first
        transform: Cleanup applied to the matched text

    Returns:
        Transformed text of the first match

    Raises:
        SelectorSyntaxError: If a selector cannot be parsed
        NotFound: If no selector matches
    """
    for selector in selectors:
        text = select_text(document, selector)
        if text is not None:
            return transform(text)

    raise NotFound(
        f"No match for selectors: {', '.join(selectors) or '(none)'}",
        selectors=list(selectors),
    )
