"""Command-line entry point for the interactive currency converter."""

from __future__ import annotations

import argparse
from typing import Final, Sequence

from currency_converter import __version__
from currency_converter.errors import RecoverableError
from currency_converter.rates.table import RateTable
from currency_converter.session.console import Console, StdioConsole
from currency_converter.session.loop import Session
from currency_converter.utils.logger import configure_logging, get_logger

LOGGER = get_logger(__name__)

EXIT_FAILURE: Final[int] = 1
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")

__all__ = ["EXIT_FAILURE", "main", "parse_args", "run_session"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse process arguments for the interactive converter."""

    parser = argparse.ArgumentParser(
        prog="currency-converter",
        description="Convert amounts between currencies using a fixed USD rate table.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Verbosity of diagnostic logging written to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def run_session(console: Console | None = None, table: RateTable | None = None) -> int:
    """Run a session to completion and translate its outcome to an exit status.

    Recoverable errors are shown to the user; anything else is logged with its
    traceback. Both end the process with :data:`EXIT_FAILURE`.
    """

    console = console if console is not None else StdioConsole()
    try:
        return Session(console, table).run()
    except RecoverableError as exc:
        console.write(str(exc))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        LOGGER.info("Session interrupted")
        return EXIT_FAILURE
    except Exception:
        LOGGER.exception("Session failed with an unexpected error")
        return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter on standard streams and return the exit status."""

    args = parse_args(argv)
    configure_logging(args.log_level)
    return run_session()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
