"""Per-attribute results and the resolution map."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from quote_scraper.errors import NotFound, ScrapeError

from .stock import AttributeId


@dataclass(frozen=True)
class AttributeResult:
    """Either an extracted value or the error that prevented it."""

    value: str | None = None
    error: ScrapeError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("AttributeResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: str) -> "AttributeResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ScrapeError) -> "AttributeResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: str) -> str:
        return self.value if self.value is not None else default

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        if self.ok:
            return {"value": self.value}
        return {"error": self.error.kind, "message": str(self.error)}


ResolutionMap = dict[AttributeId, AttributeResult]


def empty_resolution(attributes: Iterable[AttributeId]) -> ResolutionMap:
    """Build a map with every attribute defaulted to a NotFound failure."""
    return {attr: AttributeResult.failure(NotFound()) for attr in attributes}


def is_complete(resolution: ResolutionMap) -> bool:
    """True when every attribute in the map holds a value."""
    return all(result.ok for result in resolution.values())


def coalesce(dest: ResolutionMap, src: ResolutionMap) -> None:
    """Merge ``src`` into ``dest`` in place.

    A value already in ``dest`` is never replaced. Any other entry takes the
    incoming result, so a later failure may replace an earlier failure.
    """
    for attr, result in src.items():
        current = dest.get(attr)
        if current is not None and current.ok:
            continue
        dest[attr] = result
