"""Abstractions for pluggable exchange-rate sources."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Iterable, Iterator, Mapping, Protocol

# Units of each currency per one USD. Order is the display order of the intro.
DEFAULT_RATES: Final[Mapping[str, float]] = MappingProxyType(
    {
        "USD": 1,
        "JPY": 113.5,
        "EUR": 0.89,
        "RUB": 74.36,
        "GBP": 0.75,
    }
)


class RateSource(Protocol):
    """Contract for anything that can provide a rate table's entries.

    Implementations yield ``(code, rate)`` pairs in the order they should be
    displayed. Validation of the pairs is left to
    :class:`~currency_converter.rates.table.RateTable`.
    """

    def load(self) -> Iterable[tuple[str, float]]:
        ...  # pragma: no cover - protocol definition


class StaticRateSource:
    """Rate source backed by an in-memory mapping."""

    __slots__ = ("_rates",)

    def __init__(self, rates: Mapping[str, float] = DEFAULT_RATES) -> None:
        self._rates = dict(rates)

    def load(self) -> Iterator[tuple[str, float]]:
        return iter(self._rates.items())


__all__ = ["DEFAULT_RATES", "RateSource", "StaticRateSource"]
