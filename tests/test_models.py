"""Stock, result and descriptor model tests."""

import pytest
from pydantic import ValidationError

from quote_scraper.errors import NotFound, UnsupportedAttribute
from quote_scraper.models import (
    AttributeId,
    AttributeResult,
    AttributeRule,
    SourceDescriptor,
    SourceId,
    Stock,
    coalesce,
    empty_resolution,
    is_complete,
)
from quote_scraper.sources.transforms import ticker_path_url


def test_stock_parse_with_exchange():
    s = Stock.parse("GOOG:NASDAQ")
    assert s.ticker == "GOOG"
    assert s.exchange == "NASDAQ"
    assert str(s) == "GOOG:NASDAQ"


def test_stock_parse_strips_whitespace_and_blank_exchange():
    s = Stock.parse(" MSFT : ")
    assert s.ticker == "MSFT"
    assert s.exchange is None
    assert str(s) == "MSFT"


def test_stock_parse_ignores_trailing_segments():
    s = Stock.parse("BRK:NYSE:B")
    assert s.ticker == "BRK"
    assert s.exchange == "NYSE"


def test_stock_rejects_empty_ticker():
    with pytest.raises(ValidationError):
        Stock(ticker="  ")


def test_stock_is_immutable():
    s = Stock(ticker="GOOG")
    with pytest.raises(ValidationError):
        s.ticker = "MSFT"


def test_attribute_result_success_and_failure():
    ok = AttributeResult.success("12.34")
    assert ok.ok is True
    assert ok.value_or("?") == "12.34"
    assert ok.to_dict() == {"value": "12.34"}

    err = AttributeResult.failure(NotFound())
    assert err.ok is False
    assert err.value_or("?") == "?"
    assert err.to_dict()["error"] == "not_found"


def test_attribute_result_empty_string_is_a_value():
    assert AttributeResult.success("").ok is True


def test_attribute_result_requires_exactly_one_side():
    with pytest.raises(ValueError):
        AttributeResult()
    with pytest.raises(ValueError):
        AttributeResult(value="1", error=NotFound())


def test_empty_resolution_defaults_to_not_found():
    resolution = empty_resolution([AttributeId.PRICE, AttributeId.PE])
    assert set(resolution) == {AttributeId.PRICE, AttributeId.PE}
    assert all(isinstance(r.error, NotFound) for r in resolution.values())
    assert is_complete(resolution) is False


def test_is_complete_on_empty_map():
    assert is_complete({}) is True


def test_coalesce_keeps_existing_success():
    dest = {AttributeId.PRICE: AttributeResult.success("1.00")}
    coalesce(dest, {AttributeId.PRICE: AttributeResult.success("2.00")})
    assert dest[AttributeId.PRICE].value == "1.00"

    coalesce(dest, {AttributeId.PRICE: AttributeResult.failure(NotFound())})
    assert dest[AttributeId.PRICE].value == "1.00"


def test_coalesce_replaces_failures():
    dest = empty_resolution([AttributeId.PRICE, AttributeId.PCT_CHANGE])
    unsupported = UnsupportedAttribute("Yahoo", "pct_change")
    coalesce(dest, {
        AttributeId.PRICE: AttributeResult.success("3.00"),
        AttributeId.PCT_CHANGE: AttributeResult.failure(unsupported),
    })
    assert dest[AttributeId.PRICE].value == "3.00"
    # Last failure seen is the one kept
    assert dest[AttributeId.PCT_CHANGE].error is unsupported


def test_source_descriptor_rejects_mismatched_rule_key():
    rule = AttributeRule(attribute_id=AttributeId.PRICE, selector_provider=lambda s: ["#p"])
    with pytest.raises(ValueError):
        SourceDescriptor(
            id=SourceId.CNBC,
            base_url="https://cnbc.test/",
            url_builder=ticker_path_url,
            rules={AttributeId.PE: rule},
        )


def test_source_descriptor_rules_are_read_only():
    rule = AttributeRule(attribute_id=AttributeId.PRICE, selector_provider=lambda s: ["#p"])
    source = SourceDescriptor(
        id=SourceId.CNBC,
        base_url="https://cnbc.test/",
        url_builder=ticker_path_url,
        rules={AttributeId.PRICE: rule},
    )
    assert source.supports(AttributeId.PRICE)
    assert not source.supports(AttributeId.PE)
    with pytest.raises(TypeError):
        source.rules[AttributeId.PE] = rule

