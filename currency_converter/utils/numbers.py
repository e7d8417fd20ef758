"""Parsing and rendering helpers for user-facing numbers."""

from __future__ import annotations

import math
import re
from typing import Final

# Plain decimal literals: optional sign, digits with an optional fraction (or a
# bare fraction) and an optional exponent. No underscores or nan.
_DECIMAL_LITERAL: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)
# Unsigned hex, binary and octal literals.
_PREFIXED_LITERAL: Final[re.Pattern[str]] = re.compile(
    r"0(?:[xX][0-9a-fA-F]+|[bB][01]+|[oO][0-7]+)",
    re.ASCII,
)
_INFINITY_LITERAL: Final[re.Pattern[str]] = re.compile(r"[+-]?Infinity")


def parse_number(text: str) -> float | None:
    """Parse ``text`` as a number, returning ``None`` when it is not one.

    Surrounding whitespace is ignored and a blank string reads as ``0``.
    Besides decimal literals, ``0x``/``0b``/``0o`` integers and ``Infinity``
    are accepted; literals too large for a float read as infinity.
    """

    stripped = text.strip()
    if not stripped:
        return 0.0
    if _PREFIXED_LITERAL.fullmatch(stripped) is not None:
        try:
            return float(int(stripped, 0))
        except OverflowError:
            return math.inf
    if _INFINITY_LITERAL.fullmatch(stripped) is not None:
        return -math.inf if stripped.startswith("-") else math.inf
    if _DECIMAL_LITERAL.fullmatch(stripped) is None:
        return None
    return float(stripped)


def format_number(value: float) -> str:
    """Render ``value`` the way it is echoed back to the user.

    Integral values drop the fractional part (``10`` rather than ``10.0``);
    everything else uses the shortest round-trip representation.
    """

    if isinstance(value, int):
        return str(value)
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


__all__ = ["format_number", "parse_number"]
