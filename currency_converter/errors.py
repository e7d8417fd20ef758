"""Exception hierarchy for the currency converter.

Recoverable errors carry a short user-facing message and end the process with
a failing status. Anything outside this hierarchy is treated as unrecoverable
and logged in full by the entry point.
"""

from __future__ import annotations


class ConverterError(Exception):
    """Base class for errors raised by :mod:`currency_converter`."""


class RecoverableError(ConverterError):
    """Error whose message is meant to be shown to the user as-is."""


class UnknownCurrencyError(RecoverableError):
    """A currency code is missing from the rate table."""

    def __init__(self, code: str | None = None) -> None:
        super().__init__("Unknown currency")
        self.code = code


class InputClosedError(ConverterError):
    """Raised when the interactive input stream is exhausted."""

    def __init__(self) -> None:
        super().__init__("Input stream closed before the session ended")


__all__ = ["ConverterError", "InputClosedError", "RecoverableError", "UnknownCurrencyError"]
