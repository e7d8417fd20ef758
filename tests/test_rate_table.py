from __future__ import annotations

import math

import pytest

from currency_converter.rates import (
    BASE_CURRENCY,
    DEFAULT_RATES,
    RateTable,
    StaticRateSource,
    default_rate_table,
)


def test_default_table_preserves_display_order() -> None:
    table = default_rate_table()

    assert table.codes == ("USD", "JPY", "EUR", "RUB", "GBP")
    assert list(table) == list(DEFAULT_RATES)
    assert len(table) == 5


def test_every_price_is_positive_and_base_is_one() -> None:
    table = default_rate_table()

    for code in table.codes:
        price = table.price_of(code)
        assert price is not None and price > 0
    assert table.base_currency == BASE_CURRENCY == "USD"
    assert table.price_of(BASE_CURRENCY) == 1


def test_default_rates_match_fixed_values() -> None:
    table = default_rate_table()

    assert dict(table.items()) == {
        "USD": 1,
        "JPY": 113.5,
        "EUR": 0.89,
        "RUB": 74.36,
        "GBP": 0.75,
    }


def test_price_of_unknown_code_is_none() -> None:
    table = default_rate_table()

    assert table.price_of("XYZ") is None
    assert table.price_of("usd") is None
    assert "XYZ" not in table
    assert "EUR" in table


def test_table_is_read_only() -> None:
    table = default_rate_table()

    with pytest.raises(TypeError):
        table["USD"] = 2  # type: ignore[index]
    with pytest.raises(AttributeError):
        table.extra = {}  # type: ignore[attr-defined]


def test_table_copies_its_input() -> None:
    prices = {"USD": 1.0, "EUR": 0.9}
    table = RateTable(prices)

    prices["EUR"] = 5.0

    assert table.price_of("EUR") == 0.9


@pytest.mark.parametrize(
    "prices, message",
    [
        ({"EUR": 0.9}, "USD must be present"),
        ({"USD": 2, "EUR": 0.9}, "USD must be present"),
        ({"USD": 1, "EUR": 0}, "positive"),
        ({"USD": 1, "EUR": -0.5}, "positive"),
        ({"USD": 1, "EUR": math.nan}, "positive"),
        ({"USD": 1, "EUR": math.inf}, "positive"),
        ({"USD": 1, "EUR": True}, "must be a number"),
        ({"USD": 1, "EUR": "0.9"}, "must be a number"),
        ({"USD": 1, "eur": 0.9}, "uppercase"),
        ({"USD": 1, "": 0.9}, "uppercase"),
    ],
)
def test_invalid_tables_are_rejected(prices: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        RateTable(prices)


def test_from_source_rejects_duplicate_codes() -> None:
    class _DuplicatingSource:
        def load(self):
            return [("USD", 1), ("EUR", 0.9), ("EUR", 0.8)]

    with pytest.raises(ValueError, match="Duplicate currency code: EUR"):
        RateTable.from_source(_DuplicatingSource())


def test_from_static_source_with_custom_rates() -> None:
    table = RateTable.from_source(StaticRateSource({"USD": 1, "CHF": 0.92}))

    assert table.codes == ("USD", "CHF")
    assert table.price_of("CHF") == 0.92
    assert repr(table) == "RateTable({'USD': 1, 'CHF': 0.92})"
