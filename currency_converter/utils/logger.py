"""Logging utilities for the currency_converter package."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER_NAME = "currency_converter"

_HANDLER: Optional[logging.Handler] = None


def _ensure_handler() -> logging.Logger:
    global _HANDLER
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _HANDLER is None:
        # Prompts own stdout, so log records always go to stderr.
        _HANDLER = logging.StreamHandler(sys.stderr)
        _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_HANDLER)
        root.setLevel(logging.WARNING)
    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a package logger that writes through a single stderr handler."""
    _ensure_handler()
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Set the verbosity of every ``currency_converter`` logger."""

    root = _ensure_handler()
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    root.setLevel(level)
    return root


__all__ = ["LOG_FORMAT", "configure_logging", "get_logger"]
