"""Public interface for the calday package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from calday.iter.month_days import MonthDays, days
from calday.span import (
    FULL_SPAN,
    DayInterval,
    DaySpan,
    ExplicitSpan,
    FromSpan,
    FullSpan,
    ToSpan,
    resolve_span,
    span_from_slice,
)
from calday.units import Month, Year, YearMonth, is_leap_year

__all__ = [
    "__version__",
    "DayInterval",
    "DaySpan",
    "ExplicitSpan",
    "FULL_SPAN",
    "FromSpan",
    "FullSpan",
    "Month",
    "MonthDays",
    "ToSpan",
    "Year",
    "YearMonth",
    "days",
    "is_leap_year",
    "resolve_span",
    "span_from_slice",
]

try:
    __version__ = importlib_metadata.version("calday")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"
