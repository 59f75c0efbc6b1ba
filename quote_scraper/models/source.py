"""Source descriptor models.

A source is pure data: how to build its page URL and, per attribute, which
selectors to try and how to clean up the matched text.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .stock import AttributeId, Stock


class SourceId(str, Enum):
    """Known quote sites."""

    YAHOO = "Yahoo"
    SEEKING_ALPHA = "SeekingAlpha"
    GOOGLE_FINANCE = "GoogleFinance"
    WALL_STREET_JOURNAL = "WallStreetJournal"
    CNBC = "CNBC"
    BLOOMBERG = "Bloomberg"


SelectorProvider = Callable[[Stock], Sequence[str]]
Transform = Callable[[str], str]
UrlBuilder = Callable[[str, Stock], str]


def _keep(text: str) -> str:
    return text


@dataclass(frozen=True)
class AttributeRule:
    """How to extract one attribute from a source page."""

    attribute_id: AttributeId
    selector_provider: SelectorProvider
    transform: Transform = _keep

    def selectors(self, stock: Stock) -> list[str]:
        return list(self.selector_provider(stock))


@dataclass(frozen=True)
class SourceDescriptor:
    """Static description of one data source.

    ``url_builder`` receives ``base_url`` and the stock and returns the page
    URL, raising ``ExchangeMissing`` when the stock lacks required context.
    """

    id: SourceId
    base_url: str
    url_builder: UrlBuilder
    rules: Mapping[AttributeId, AttributeRule] = field(default_factory=dict)
    needs_exchange: bool = False

    def __post_init__(self) -> None:
        for attribute_id, rule in self.rules.items():
            if rule.attribute_id != attribute_id:
                raise ValueError(
                    f"{self.id.value}: rule for {rule.attribute_id.value} "
                    f"registered under {attribute_id.value}"
                )
        # Rules are read-only after construction
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    @property
    def name(self) -> str:
        return self.id.value

    def build_url(self, stock: Stock) -> str:
        return self.url_builder(self.base_url, stock)

    def supports(self, attribute_id: AttributeId) -> bool:
        return attribute_id in self.rules
