"""Lazy, double-ended iteration over a span of days in one month."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator

from calday.span import DayInterval, SpanLike, coerce_span, resolve_span
from calday.units import YearMonth
from calday.utils.dates import make_date
from calday.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class MonthDays:
    """Iterator over a continuous span of days in a month.

    Forward iteration takes days from the start of the interval and
    :meth:`next_back` takes them from the end; both share the same cursor so a
    day is never produced twice. A day that does not form a valid date ends
    the current step just like exhaustion does. The day is consumed, so a
    later call carries on with the next one.

    Use :func:`days` or :meth:`YearMonth.days` to build instances.
    """

    year_month: YearMonth
    interval: DayInterval

    def __iter__(self) -> "MonthDays":
        return self

    def __next__(self) -> date:
        value = self.next_front()
        if value is None:
            raise StopIteration
        return value

    def __reversed__(self) -> Iterator[date]:
        return _BackwardDays(self)

    def next_front(self) -> date | None:
        """Consume the earliest remaining day; ``None`` ends the sequence."""

        return self._build(self.interval.pop_front())

    def next_back(self) -> date | None:
        """Consume the latest remaining day; ``None`` ends the sequence."""

        return self._build(self.interval.pop_back())

    def remaining(self) -> int:
        """Number of day numbers left in the cursor, valid or not."""

        return self.interval.size()

    def _build(self, day: int | None) -> date | None:
        if day is None:
            return None
        ym = self.year_month
        value = make_date(ym.year, ym.month, day)
        if value is None:
            LOGGER.debug("Day %s is not valid in %s; ending iteration", day, ym)
        return value


class _BackwardDays:
    """Reverse view driving :meth:`MonthDays.next_back` on a shared cursor."""

    __slots__ = ("_days",)

    def __init__(self, month_days: MonthDays) -> None:
        self._days = month_days

    def __iter__(self) -> "_BackwardDays":
        return self

    def __next__(self) -> date:
        value = self._days.next_back()
        if value is None:
            raise StopIteration
        return value


def days(year_month: YearMonth, span: SpanLike | None = None) -> MonthDays:
    """Return an iterator over the days ``span`` selects in ``year_month``.

    ``span`` is one of the :mod:`calday.span` variants or a ``slice`` such as
    ``slice(10, 20)``; ``None`` selects the whole month. The interval is
    resolved once, here.
    """

    interval = resolve_span(coerce_span(span), year_month)
    return MonthDays(year_month=year_month, interval=interval)


__all__ = ["MonthDays", "days"]
