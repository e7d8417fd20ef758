"""Validated prompts for the interactive converter.

Each ``ask_*`` method owns a retry loop: invalid input prints a short message
and repeats the same question, so callers only ever see accepted values.
"""

from __future__ import annotations

from typing import Final, Mapping

from currency_converter.conversion.models import ConversionResult
from currency_converter.rates.table import RateTable
from currency_converter.session.console import Console
from currency_converter.utils.logger import get_logger
from currency_converter.utils.numbers import format_number, parse_number

LOGGER = get_logger(__name__)

WELCOME_MESSAGE: Final[str] = "Welcome to Currency Converter!"
COMMAND_QUESTION: Final[str] = "What do you want to do?"
CONVERT_QUESTION: Final[str] = "What do you want to convert?"
UNKNOWN_INPUT_MESSAGE: Final[str] = "Unknown input"
UNKNOWN_CURRENCY_MESSAGE: Final[str] = "Unknown currency"
NOT_A_NUMBER_MESSAGE: Final[str] = "The amount has to be a number"
AMOUNT_TOO_SMALL_MESSAGE: Final[str] = "The amount cannot be less than 1"
MINIMUM_AMOUNT: Final[int] = 1

FROM_PROMPT: Final[str] = "From: "
TO_PROMPT: Final[str] = "To: "
AMOUNT_PROMPT: Final[str] = "Amount: "


class Prompter:
    """Asks the questions of a session and validates the answers."""

    __slots__ = ("console", "table")

    def __init__(self, console: Console, table: RateTable) -> None:
        self.console = console
        self.table = table

    def print_intro(self) -> None:
        self.console.write(WELCOME_MESSAGE)
        base = self.table.base_currency
        for code, rate in self.table.items():
            self.console.write(f"1 {base} equals {format_number(rate)} {code}")

    def ask_for_command(self, descriptions: Mapping[str, str]) -> str:
        """Return the identifier of the command the user picked.

        ``descriptions`` maps identifiers to the labels shown in the menu line.
        Identifiers are compared exactly as typed.
        """

        menu = " ".join(f"{key}-{label}" for key, label in descriptions.items())
        while True:
            self.console.write(COMMAND_QUESTION)
            answer = self.console.read_line(f"{menu}\n")
            if answer not in descriptions:
                LOGGER.debug("Rejected command %r", answer)
                self.console.write(UNKNOWN_INPUT_MESSAGE)
                continue
            return answer

    def ask_for_currency(self, prompt: str, *, header: str | None = None) -> str:
        """Ask for a currency code until a known one is given.

        ``header`` is repeated before every attempt when provided.
        """

        while True:
            if header is not None:
                self.console.write(header)
            code = self.console.read_line(prompt).upper()
            if code not in self.table:
                LOGGER.debug("Rejected currency %r", code)
                self.console.write(UNKNOWN_CURRENCY_MESSAGE)
                continue
            return code

    def ask_for_currencies(self) -> tuple[str, str]:
        # Source and target may be the same code.
        currency_from = self.ask_for_currency(FROM_PROMPT, header=CONVERT_QUESTION)
        currency_to = self.ask_for_currency(TO_PROMPT)
        return currency_from, currency_to

    def ask_for_amount(self) -> float:
        while True:
            answer = self.console.read_line(AMOUNT_PROMPT)
            amount = parse_number(answer)
            if amount is None:
                LOGGER.debug("Rejected non-numeric amount %r", answer)
                self.console.write(NOT_A_NUMBER_MESSAGE)
                continue
            if amount < MINIMUM_AMOUNT:
                LOGGER.debug("Rejected amount below minimum: %s", format_number(amount))
                self.console.write(AMOUNT_TOO_SMALL_MESSAGE)
                continue
            return amount

    def print_conversion_result(self, result: ConversionResult) -> None:
        self.console.write(result.describe())


__all__ = [
    "AMOUNT_TOO_SMALL_MESSAGE",
    "NOT_A_NUMBER_MESSAGE",
    "Prompter",
    "UNKNOWN_CURRENCY_MESSAGE",
    "UNKNOWN_INPUT_MESSAGE",
    "WELCOME_MESSAGE",
]
