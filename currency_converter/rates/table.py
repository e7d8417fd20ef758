"""Immutable currency price table."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Final, Iterator, Mapping

from currency_converter.rates.source import RateSource, StaticRateSource

BASE_CURRENCY: Final[str] = "USD"


class RateTable:
    """Prices of known currencies expressed in units per one base currency.

    The table is populated once and never mutated. Unknown codes are reported
    as ``None`` by :meth:`price_of` rather than raising.
    """

    __slots__ = ("_prices",)

    def __init__(self, prices: Mapping[str, float]) -> None:
        self._prices: Mapping[str, float] = MappingProxyType(self._validate(prices))

    @classmethod
    def from_source(cls, source: RateSource) -> "RateTable":
        """Build a table from the pairs yielded by ``source``."""

        prices: dict[str, float] = {}
        for code, rate in source.load():
            if code in prices:
                raise ValueError(f"Duplicate currency code: {code}")
            prices[code] = rate
        return cls(prices)

    @staticmethod
    def _validate(prices: Mapping[str, float]) -> dict[str, float]:
        validated: dict[str, float] = {}
        for code, rate in prices.items():
            if not code or code != code.upper():
                raise ValueError(f"Currency codes must be non-empty uppercase strings: {code!r}")
            if isinstance(rate, bool) or not isinstance(rate, (int, float)):
                raise ValueError(f"Rate for {code} must be a number")
            if not math.isfinite(rate) or rate <= 0:
                raise ValueError(f"Rate for {code} must be a positive number")
            validated[code] = rate
        if validated.get(BASE_CURRENCY) != 1:
            raise ValueError(f"{BASE_CURRENCY} must be present with a rate of 1")
        return validated

    @property
    def base_currency(self) -> str:
        return BASE_CURRENCY

    @property
    def codes(self) -> tuple[str, ...]:
        """Every known currency code in insertion order."""
        return tuple(self._prices)

    def price_of(self, code: str) -> float | None:
        return self._prices.get(code)

    def items(self) -> Iterator[tuple[str, float]]:
        return iter(self._prices.items())

    def __contains__(self, code: object) -> bool:
        return code in self._prices

    def __iter__(self) -> Iterator[str]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __repr__(self) -> str:
        return f"RateTable({dict(self._prices)!r})"


def default_rate_table() -> RateTable:
    """Return the table used by the interactive converter."""

    return RateTable.from_source(StaticRateSource())


__all__ = ["BASE_CURRENCY", "RateTable", "default_rate_table"]
