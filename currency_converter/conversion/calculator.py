"""Conversion arithmetic over a :class:`~currency_converter.rates.RateTable`."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

from currency_converter.conversion.models import ConversionRequest, ConversionResult
from currency_converter.errors import UnknownCurrencyError
from currency_converter.rates.table import BASE_CURRENCY, RateTable
from currency_converter.utils.logger import get_logger
from currency_converter.utils.numbers import format_number

LOGGER = get_logger(__name__)

DECIMAL_PLACES: Final[int] = 4


def round_half_away_from_zero(value: float, places: int = DECIMAL_PLACES) -> Decimal:
    """Round ``value`` to ``places`` decimals, ties away from zero.

    The shortest decimal representation of the float is rounded, so ``1.00005``
    becomes ``1.0001`` even though its binary value sits slightly below the tie.
    Infinities are returned unrounded.
    """

    exact = Decimal(repr(value))
    if not exact.is_finite():
        return exact
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Enough precision for every digit left of the point plus the fraction.
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)


def _price(table: RateTable, code: str) -> float:
    price = table.price_of(code)
    if price is None:
        raise UnknownCurrencyError(code)
    return price


def convert(table: RateTable, request: ConversionRequest) -> ConversionResult:
    """Convert ``request.amount`` using the prices held by ``table``.

    Raises :class:`UnknownCurrencyError` when either code is missing from the
    table.
    """

    price_usd_of_source = _price(table, BASE_CURRENCY) * _price(table, request.currency_from)
    converted = _price(table, request.currency_to) / price_usd_of_source * request.amount
    rounded = round_half_away_from_zero(converted)
    LOGGER.debug(
        "Converted %s %s to %s %s",
        format_number(request.amount),
        request.currency_from,
        rounded,
        request.currency_to,
    )
    return ConversionResult(
        currency_from=request.currency_from,
        currency_to=request.currency_to,
        initial_amount=request.amount,
        converted_amount=rounded,
    )


__all__ = ["DECIMAL_PLACES", "convert", "round_half_away_from_zero"]
