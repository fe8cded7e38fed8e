"""Fallible date construction shared by the day iterators."""

from __future__ import annotations

from datetime import date


def make_date(year: int, month: int, day: int) -> date | None:
    """Return ``date(year, month, day)`` or ``None`` when the triple is invalid.

    Every check :class:`datetime.date` performs applies: the day must exist in
    that month, the month must be within 1..12 and the year within
    ``date.min.year``..``date.max.year``. Numbers too large for
    :class:`datetime.date` to accept count as invalid too.
    """

    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None


__all__ = ["make_date"]
