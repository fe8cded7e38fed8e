"""Iterators over calendar values."""

from __future__ import annotations

from calday.iter.month_days import MonthDays, days

__all__ = ["MonthDays", "days"]
