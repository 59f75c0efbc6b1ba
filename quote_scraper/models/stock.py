"""Stock and attribute models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AttributeId(str, Enum):
    """Financial attributes that sources may expose."""

    PRICE = "price"
    PCT_CHANGE = "pct_change"
    PE = "pe"


class Stock(BaseModel):
    """A ticker symbol, optionally qualified by its exchange.

    Sources that embed the exchange in their URL cannot serve a stock
    without one.
    """

    model_config = ConfigDict(frozen=True)

    ticker: str = Field(min_length=1, description="Ticker symbol (e.g., 'GOOG')")
    exchange: str | None = Field(default=None, description="Exchange code (e.g., 'NASDAQ')")

    @field_validator("ticker", mode="before")
    @classmethod
    def _strip_ticker(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("exchange", mode="before")
    @classmethod
    def _blank_exchange_is_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @classmethod
    def parse(cls, token: str) -> "Stock":
        """Parse a ``TICKER`` or ``TICKER:EXCHANGE`` token."""
        parts = token.split(":")
        exchange = parts[1] if len(parts) > 1 else None
        return cls(ticker=parts[0], exchange=exchange)

    def __str__(self) -> str:
        if self.exchange:
            return f"{self.ticker}:{self.exchange}"
        return self.ticker
