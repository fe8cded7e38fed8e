from __future__ import annotations

from datetime import date

import calday
from calday import ExplicitSpan, Month, Year, YearMonth, days


def test_public_interface_exports() -> None:
    for name in calday.__all__:
        assert hasattr(calday, name)
    assert isinstance(calday.__version__, str)


def test_days_defaults_to_whole_month() -> None:
    result = list(days(Year(1999).month(Month.SEPTEMBER)))

    assert len(result) == 30
    assert result[0] == date(1999, 9, 1)


def test_days_accepts_slices_and_spans() -> None:
    ym = YearMonth(1999, 9)

    assert list(days(ym, slice(10, 20))) == list(days(ym, ExplicitSpan(10, 20)))
