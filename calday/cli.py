"""List the dates of a month, optionally bounded to a span of days."""

from __future__ import annotations

import argparse
import logging
from datetime import date

from calday.iter.month_days import days
from calday.span import FULL_SPAN, DaySpan, ExplicitSpan, FromSpan, ToSpan
from calday.units import YearMonth
from calday.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["build_span", "list_days", "parse_args", "main"]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("year", type=int, help="Calendar year, e.g. 2024")
    parser.add_argument(
        "month", type=int, choices=range(1, 13), metavar="MONTH", help="Month number (1-12)"
    )
    parser.add_argument(
        "--from",
        dest="start",
        type=int,
        help="First day of the month to include",
    )
    parser.add_argument(
        "--to",
        dest="end",
        type=int,
        help="Day of the month to stop before (exclusive)",
    )
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="List the days latest first",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def build_span(start: int | None, end: int | None) -> DaySpan:
    """Pick the span variant matching which of ``start``/``end`` are given."""

    if start is None:
        return FULL_SPAN if end is None else ToSpan(end)
    if end is None:
        return FromSpan(start)
    return ExplicitSpan(start, end)


def list_days(
    year_month: YearMonth,
    *,
    start: int | None = None,
    end: int | None = None,
    reverse: bool = False,
) -> list[date]:
    """Collect the dates selected by ``start``/``end`` in ``year_month``."""

    span = build_span(start, end)
    month_days = days(year_month, span)
    LOGGER.debug("Listing %s with %s (%s candidate days)", year_month, span, month_days.remaining())
    return list(reversed(month_days)) if reverse else list(month_days)


def main() -> None:
    args = parse_args()
    if args.verbose:
        get_logger("calday").setLevel(logging.DEBUG)
    for value in list_days(
        YearMonth(args.year, args.month),
        start=args.start,
        end=args.end,
        reverse=args.reverse,
    ):
        print(value.isoformat())


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
