"""Day spans and their resolution into half-open day-number intervals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from calday.units import YearMonth


@dataclass(frozen=True, slots=True)
class FullSpan:
    """Every day of the month."""


@dataclass(frozen=True, slots=True)
class FromSpan:
    """From ``start`` to the end of the month."""

    start: int


@dataclass(frozen=True, slots=True)
class ToSpan:
    """From the first of the month up to, but excluding, ``end``."""

    end: int


@dataclass(frozen=True, slots=True)
class ExplicitSpan:
    """Days ``start`` up to, but excluding, ``end``."""

    start: int
    end: int


DaySpan = Union[FullSpan, FromSpan, ToSpan, ExplicitSpan]
SpanLike = Union[DaySpan, slice]

FULL_SPAN = FullSpan()


@dataclass(slots=True)
class DayInterval:
    """Mutable half-open ``[start, end)`` range of day numbers.

    Elements are only ever removed from either end. Once ``start`` reaches
    ``end`` the interval is empty and stays that way. Bounds given with
    ``start > end`` describe an empty interval as well.
    """

    start: int
    end: int

    def is_empty(self) -> bool:
        return self.start >= self.end

    def size(self) -> int:
        """Number of day numbers left; unlike ``len()`` it is not capped by ``sys.maxsize``."""

        return max(0, self.end - self.start)

    def __len__(self) -> int:
        return self.size()

    def pop_front(self) -> int | None:
        """Remove and return the smallest day number, or ``None`` when empty."""

        if self.is_empty():
            return None
        day = self.start
        self.start += 1
        return day

    def pop_back(self) -> int | None:
        """Remove and return the largest day number, or ``None`` when empty."""

        if self.is_empty():
            return None
        self.end -= 1
        return self.end


def resolve_span(span: DaySpan, year_month: "YearMonth") -> DayInterval:
    """Return the day-number interval ``span`` selects within ``year_month``.

    Bounds are taken as given; nothing is clamped to the month's length, so
    out-of-range days only show up later when a date is built from them.
    """

    if isinstance(span, FullSpan):
        return DayInterval(1, year_month.day_count() + 1)
    if isinstance(span, FromSpan):
        return DayInterval(span.start, year_month.day_count() + 1)
    if isinstance(span, ToSpan):
        return DayInterval(1, span.end)
    if isinstance(span, ExplicitSpan):
        return DayInterval(span.start, span.end)
    raise TypeError(f"Unsupported day span: {span!r}")


def span_from_slice(value: slice) -> DaySpan:
    """Convert ``slice(start, stop)`` into the matching span variant."""

    if value.step is not None:
        raise ValueError("Day spans do not support a slice step")
    if value.start is None and value.stop is None:
        return FULL_SPAN
    if value.stop is None:
        return FromSpan(value.start)
    if value.start is None:
        return ToSpan(value.stop)
    return ExplicitSpan(value.start, value.stop)


def coerce_span(span: SpanLike | None) -> DaySpan:
    """Normalise ``None``, a slice or a span variant into a span variant."""

    if span is None:
        return FULL_SPAN
    if isinstance(span, slice):
        return span_from_slice(span)
    if isinstance(span, (FullSpan, FromSpan, ToSpan, ExplicitSpan)):
        return span
    raise TypeError(f"Expected a day span or slice, got {type(span).__name__}")


__all__ = [
    "DayInterval",
    "DaySpan",
    "ExplicitSpan",
    "FULL_SPAN",
    "FromSpan",
    "FullSpan",
    "SpanLike",
    "ToSpan",
    "coerce_span",
    "resolve_span",
    "span_from_slice",
]
