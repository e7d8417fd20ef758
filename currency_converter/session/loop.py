"""Command loop driving an interactive conversion session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final

from currency_converter.conversion.calculator import convert
from currency_converter.conversion.models import ConversionRequest, ConversionResult
from currency_converter.rates.table import RateTable, default_rate_table
from currency_converter.session.console import Console
from currency_converter.session.prompter import Prompter
from currency_converter.utils.logger import get_logger

LOGGER = get_logger(__name__)

FAREWELL_MESSAGE: Final[str] = "Have a nice day!"
EXIT_SUCCESS: Final[int] = 0


class SessionState(str, Enum):
    AWAITING_COMMAND = "awaiting_command"
    TERMINATED = "terminated"


@dataclass(frozen=True, slots=True)
class Command:
    """A menu entry: the label shown to the user and the action it runs."""

    description: str
    action: Callable[[], object]


class Session:
    """Interactive converter session.

    The session never ends the process itself. :meth:`run` returns the exit
    status once the user picks the exit command; recoverable and unexpected
    errors propagate to the caller, which decides how to report them.
    """

    __slots__ = ("table", "prompter", "state", "commands")

    def __init__(self, console: Console, table: RateTable | None = None) -> None:
        self.table = table if table is not None else default_rate_table()
        self.prompter = Prompter(console, self.table)
        self.state = SessionState.AWAITING_COMMAND
        self.commands: dict[str, Command] = {
            "1": Command("Convert currencies", self.convert_currencies),
            "2": Command("Exit program", self.exit),
        }

    def run(self) -> int:
        LOGGER.debug("Session started with currencies %s", ", ".join(self.table.codes))
        self.prompter.print_intro()
        while self.state is SessionState.AWAITING_COMMAND:
            self.step()
        return EXIT_SUCCESS

    def step(self) -> None:
        """Ask for one command and run it."""

        key = self.prompter.ask_for_command(
            {key: command.description for key, command in self.commands.items()}
        )
        LOGGER.debug("Running command %s (%s)", key, self.commands[key].description)
        self.commands[key].action()

    def convert_currencies(self) -> ConversionResult:
        currency_from, currency_to = self.prompter.ask_for_currencies()
        amount = self.prompter.ask_for_amount()
        request = ConversionRequest(
            currency_from=currency_from, currency_to=currency_to, amount=amount
        )
        result = convert(self.table, request)
        self.prompter.print_conversion_result(result)
        return result

    def exit(self) -> None:
        self.prompter.console.write(FAREWELL_MESSAGE)
        self.state = SessionState.TERMINATED


__all__ = ["Command", "EXIT_SUCCESS", "FAREWELL_MESSAGE", "Session", "SessionState"]
