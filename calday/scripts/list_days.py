"""CLI entry point for listing the days of a month."""

from __future__ import annotations

from calday.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
