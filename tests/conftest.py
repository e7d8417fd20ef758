from __future__ import annotations

from typing import Callable, Iterable

import pytest

from currency_converter.errors import InputClosedError


class ScriptedConsole:
    """Console double that replays predetermined lines and records output."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    @property
    def remaining(self) -> list[str]:
        return list(self._lines)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise InputClosedError()
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)


@pytest.fixture
def scripted_console() -> Callable[..., ScriptedConsole]:
    def _factory(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(lines)

    return _factory
