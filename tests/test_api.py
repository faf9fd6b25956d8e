"""Package-level helper functions."""

from __future__ import annotations

from datetime import date

import pytest

import sorani_calendar
from sorani_calendar.domain.calendar import DAY_NAMES, MONTH_NAMES


@pytest.mark.os_agnostic
def test_convert_helper_accepts_dates_and_text() -> None:
    """The production-wired converter handles both input shapes."""
    assert sorani_calendar.convert(date(2024, 10, 19)) == sorani_calendar.convert("2024-10-19")


@pytest.mark.os_agnostic
def test_convert_today_matches_host_date() -> None:
    """convert_today reads the host clock."""
    before = sorani_calendar.convert(date.today())
    result = sorani_calendar.convert_today()
    after = sorani_calendar.convert(date.today())

    assert result in (before, after)


@pytest.mark.os_agnostic
def test_convert_helper_raises_for_bad_text() -> None:
    """Bad text surfaces the domain error."""
    with pytest.raises(sorani_calendar.InvalidDateFormatError):
        sorani_calendar.convert("2024/03/21")


@pytest.mark.os_agnostic
def test_format_date_helper_renders_every_style() -> None:
    """The three layouts are reachable by enum or by name."""
    newroz = sorani_calendar.convert(date(2024, 3, 21))

    assert sorani_calendar.format_date(newroz, sorani_calendar.DateStyle.SHORT) == "2/1/2724"
    assert sorani_calendar.format_date(newroz, "date") == f"2 {MONTH_NAMES[1]} 2724"
    assert sorani_calendar.format_date(newroz).startswith(DAY_NAMES[4])


@pytest.mark.os_agnostic
def test_table_and_leap_year_helpers() -> None:
    """Name tables come back as copies; leap years follow the Gregorian rule."""
    assert sorani_calendar.get_month_names() == dict(MONTH_NAMES)
    assert sorani_calendar.get_day_names() == dict(DAY_NAMES)
    assert sorani_calendar.is_leap_year(2023) is False


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "name", ["convert", "convert_today", "format_date", "get_month_names", "get_day_names", "is_leap_year"]
)
def test_public_helpers_carry_docstrings(name: str) -> None:
    """help() on every package-level helper shows a summary line."""
    assert getattr(sorani_calendar, name).__doc__
