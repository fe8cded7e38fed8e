from __future__ import annotations

import logging
import runpy
import sys
from datetime import date

import pytest

from calday import cli as cli_module
from calday.span import FULL_SPAN, ExplicitSpan, FromSpan, ToSpan
from calday.units import YearMonth


def test_build_span_picks_variant() -> None:
    assert cli_module.build_span(None, None) is FULL_SPAN
    assert cli_module.build_span(10, None) == FromSpan(10)
    assert cli_module.build_span(None, 20) == ToSpan(20)
    assert cli_module.build_span(10, 20) == ExplicitSpan(10, 20)


def test_list_days_forward_and_reverse() -> None:
    ym = YearMonth(2024, 2)

    assert cli_module.list_days(ym, start=27) == [date(2024, 2, d) for d in (27, 28, 29)]
    assert cli_module.list_days(ym, end=3, reverse=True) == [date(2024, 2, 2), date(2024, 2, 1)]


def test_parse_args_consumes_expected_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["calday-days", "1999", "9", "--from", "10", "--to", "20"])

    args = cli_module.parse_args()

    assert (args.year, args.month, args.start, args.end) == (1999, 9, 10, 20)
    assert args.reverse is False
    assert args.verbose is False


def test_parse_args_rejects_invalid_month(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["calday-days", "1999", "13"])

    with pytest.raises(SystemExit):
        cli_module.parse_args()


def test_main_prints_iso_dates(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["calday-days", "1999", "9", "--from", "28", "--reverse"])

    cli_module.main()

    assert capsys.readouterr().out.splitlines() == ["1999-09-30", "1999-09-29", "1999-09-28"]


def test_main_verbose_enables_debug_logging(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    package_logger = logging.getLogger("calday")
    previous_level = package_logger.level
    monkeypatch.setattr(sys, "argv", ["calday-days", "2023", "2", "--to", "2", "--verbose"])
    try:
        cli_module.main()
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(previous_level)

    assert capsys.readouterr().out.splitlines() == ["2023-02-01"]


def test_list_days_script_invokes_main(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {"value": False}

    def _fake_main() -> None:
        called["value"] = True

    monkeypatch.setattr(cli_module, "main", _fake_main)

    runpy.run_module("calday.scripts.list_days", run_name="__main__")

    assert called["value"] is True


def test_main_with_huge_year_prints_nothing(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["calday-days", str(2**70), "1"])

    cli_module.main()

    assert capsys.readouterr().out == ""
