"""Allow ``python -m currency_converter``."""

from __future__ import annotations

from currency_converter.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    raise SystemExit(main())
