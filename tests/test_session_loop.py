from __future__ import annotations

import pytest

from currency_converter.errors import InputClosedError, UnknownCurrencyError
from currency_converter.rates import RateTable, default_rate_table
from currency_converter.session.loop import FAREWELL_MESSAGE, Session, SessionState

INTRO = [
    "Welcome to Currency Converter!",
    "1 USD equals 1 USD",
    "1 USD equals 113.5 JPY",
    "1 USD equals 0.89 EUR",
    "1 USD equals 74.36 RUB",
    "1 USD equals 0.75 GBP",
]


class _TableMissingPrice(RateTable):
    """Claims to know every default code but has no price for JPY."""

    __slots__ = ()

    def price_of(self, code: str) -> float | None:
        if code == "JPY":
            return None
        return super().price_of(code)


def test_full_session_transcript(scripted_console) -> None:
    console = scripted_console("9", "1", "xyz", "eur", "abc", "jpy", "abc", "0", "1", "2")
    session = Session(console)

    assert session.run() == 0

    assert console.output == INTRO + [
        "What do you want to do?",
        "Unknown input",
        "What do you want to do?",
        "What do you want to convert?",
        "Unknown currency",
        "What do you want to convert?",
        "Unknown currency",
        "The amount has to be a number",
        "The amount cannot be less than 1",
        "Result: 1 EUR equals 127.5281 JPY",
        "What do you want to do?",
        FAREWELL_MESSAGE,
    ]
    assert session.state is SessionState.TERMINATED


def test_exit_stops_prompting(scripted_console) -> None:
    console = scripted_console("2", "1", "usd")
    session = Session(console)

    assert session.run() == 0

    assert console.output[-1] == "Have a nice day!"
    assert console.prompts == ["1-Convert currencies 2-Exit program\n"]
    assert console.remaining == ["1", "usd"]


def test_invalid_command_keeps_awaiting_command(scripted_console) -> None:
    console = scripted_console("9")
    session = Session(console)

    with pytest.raises(InputClosedError):
        session.step()

    assert session.state is SessionState.AWAITING_COMMAND
    assert console.prompts == ["1-Convert currencies 2-Exit program\n"] * 2
    assert console.output == ["What do you want to do?", "Unknown input", "What do you want to do?"]


def test_convert_returns_to_menu(scripted_console) -> None:
    console = scripted_console("1", "usd", "gbp", "100", "1", "usd", "usd", "10", "2")

    assert Session(console).run() == 0

    results = [line for line in console.output if line.startswith("Result:")]
    assert results == [
        "Result: 100 USD equals 75.0000 GBP",
        "Result: 10 USD equals 10.0000 USD",
    ]


def test_convert_currencies_returns_result(scripted_console) -> None:
    console = scripted_console("eur", "jpy", "1")
    session = Session(console, default_rate_table())

    result = session.convert_currencies()

    assert result.converted_display == "127.5281"
    assert session.state is SessionState.AWAITING_COMMAND


def test_missing_price_propagates_recoverable_error(scripted_console) -> None:
    table = _TableMissingPrice(dict(default_rate_table().items()))
    console = scripted_console("1", "usd", "jpy", "5", "2")

    with pytest.raises(UnknownCurrencyError):
        Session(console, table).run()

    assert console.remaining == ["2"]


def test_commands_are_listed_in_menu_order(scripted_console) -> None:
    session = Session(scripted_console())

    assert [(key, command.description) for key, command in session.commands.items()] == [
        ("1", "Convert currencies"),
        ("2", "Exit program"),
    ]
