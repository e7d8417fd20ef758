"""Line-oriented console abstraction used by the interactive session."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from currency_converter.errors import InputClosedError


class Console(Protocol):
    """Contract for reading user lines and printing output.

    ``read_line`` blocks until a full line is available and returns it without
    the trailing newline.
    """

    def read_line(self, prompt: str) -> str:
        ...  # pragma: no cover - protocol definition

    def write(self, text: str) -> None:
        ...  # pragma: no cover - protocol definition


class StdioConsole:
    """Console bound to text streams, standard input/output by default."""

    __slots__ = ("_stdin", "_stdout")

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise InputClosedError()
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        print(text, file=self.stdout)


__all__ = ["Console", "StdioConsole"]
