"""Conversion requests, results and arithmetic."""

from __future__ import annotations

from currency_converter.conversion.calculator import (
    DECIMAL_PLACES,
    convert,
    round_half_away_from_zero,
)
from currency_converter.conversion.models import ConversionRequest, ConversionResult

__all__ = [
    "DECIMAL_PLACES",
    "ConversionRequest",
    "ConversionResult",
    "convert",
    "round_half_away_from_zero",
]
