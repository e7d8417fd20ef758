"""Public interface for the currency_converter package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

try:
    __version__ = importlib_metadata.version("currency-converter")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

from currency_converter.conversion import ConversionRequest, ConversionResult, convert
from currency_converter.errors import (
    ConverterError,
    InputClosedError,
    RecoverableError,
    UnknownCurrencyError,
)
from currency_converter.rates import (
    BASE_CURRENCY,
    DEFAULT_RATES,
    RateSource,
    RateTable,
    StaticRateSource,
    default_rate_table,
)
from currency_converter.session import Console, Session, StdioConsole

__all__ = [
    "__version__",
    "BASE_CURRENCY",
    "DEFAULT_RATES",
    "Console",
    "ConversionRequest",
    "ConversionResult",
    "ConverterError",
    "InputClosedError",
    "RateSource",
    "RateTable",
    "RecoverableError",
    "Session",
    "StaticRateSource",
    "UnknownCurrencyError",
    "convert",
    "default_rate_table",
]
