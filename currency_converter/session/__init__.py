"""Interactive session: console access, validated prompts and the command loop."""

from __future__ import annotations

from currency_converter.session.console import Console, StdioConsole
from currency_converter.session.loop import Command, Session, SessionState
from currency_converter.session.prompter import Prompter

__all__ = ["Command", "Console", "Prompter", "Session", "SessionState", "StdioConsole"]
