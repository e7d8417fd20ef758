"""Value objects exchanged between the prompts and the calculator."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from currency_converter.utils.numbers import format_number


@dataclass(frozen=True, slots=True)
class ConversionRequest:
    """A validated request to convert ``amount`` units of ``currency_from``."""

    currency_from: str
    currency_to: str
    amount: float

    def __post_init__(self) -> None:
        if self.amount < 1:
            raise ValueError("amount cannot be less than 1")


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a conversion, with ``converted_amount`` already rounded."""

    currency_from: str
    currency_to: str
    initial_amount: float
    converted_amount: Decimal

    @property
    def converted_display(self) -> str:
        """Fixed-point rendering of the converted amount, trailing zeros kept."""
        if not self.converted_amount.is_finite():
            return str(self.converted_amount)
        return format(self.converted_amount, "f")

    def describe(self) -> str:
        return (
            f"Result: {format_number(self.initial_amount)} {self.currency_from} "
            f"equals {self.converted_display} {self.currency_to}"
        )


__all__ = ["ConversionRequest", "ConversionResult"]
