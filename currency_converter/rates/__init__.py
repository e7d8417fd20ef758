"""Exchange-rate tables used by the converter."""

from __future__ import annotations

from currency_converter.rates.source import DEFAULT_RATES, RateSource, StaticRateSource
from currency_converter.rates.table import BASE_CURRENCY, RateTable, default_rate_table

__all__ = [
    "BASE_CURRENCY",
    "DEFAULT_RATES",
    "RateSource",
    "RateTable",
    "StaticRateSource",
    "default_rate_table",
]
