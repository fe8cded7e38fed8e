"""Calendar value types: months, years and year-month pairs."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from calday.iter.month_days import MonthDays
    from calday.span import SpanLike


def is_leap_year(year: int) -> bool:
    """Return ``True`` for Gregorian leap years."""

    return calendar.isleap(year)


class Month(IntEnum):
    """Months of the year, numbered from 1."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def days_in_month(self, leap_year: bool) -> int:
        """Return the number of days in this month (28-31)."""

        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        if self in (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER):
            return 30
        return 31


@dataclass(frozen=True)
class Year:
    """A calendar year."""

    value: int

    def is_leap_year(self) -> bool:
        return is_leap_year(self.value)

    def month(self, month: Month | int) -> "YearMonth":
        """Pair this year with ``month``."""

        return YearMonth(self.value, month)

    def months(self) -> Iterator["YearMonth"]:
        """Yield every month of the year, January first."""

        for month in Month:
            yield YearMonth(self.value, month)


@dataclass(frozen=True)
class YearMonth:
    """One calendar month of one year.

    ``month`` accepts a :class:`Month` or a plain integer and is always stored
    as a :class:`Month`.
    """

    year: int
    month: Month

    def __post_init__(self) -> None:
        object.__setattr__(self, "month", Month(self.month))

    @classmethod
    def from_date(cls, value: date) -> "YearMonth":
        """Return the year-month containing ``value``."""

        return cls(value.year, value.month)

    def day_count(self) -> int:
        """Return the number of days in this month (28-31)."""

        return self.month.days_in_month(is_leap_year(self.year))

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def last_day(self) -> date:
        return date(self.year, self.month, self.day_count())

    def days(self, span: "SpanLike | None" = None) -> "MonthDays":
        """Return an iterator over the days of this month selected by ``span``."""

        from calday.iter.month_days import days as _days

        return _days(self, span)

    def __str__(self) -> str:
        return f"{self.year:04d}-{int(self.month):02d}"


__all__ = ["Month", "Year", "YearMonth", "is_leap_year"]
