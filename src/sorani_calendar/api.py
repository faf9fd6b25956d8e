"""Module-level conversion helpers backed by production wiring.

Convenience surface for callers that want plain functions instead of
constructing a :class:`~sorani_calendar.application.converter.SoraniCalendar`.
The converter reads the host clock and parses ISO-8601 text.
"""

from __future__ import annotations

from functools import lru_cache

from .application.converter import DateInput, SoraniCalendar
from .composition import build_production
from .domain import calendar
from .domain.calendar import SoraniDate
from .domain.enums import DateStyle


@lru_cache(maxsize=1)
def default_calendar() -> SoraniCalendar:
    """Return the shared production-wired converter."""
    return build_production().calendar()


def convert(value: DateInput = None) -> SoraniDate:
    """Convert a date, ISO-8601 text, or (when omitted) today.

    Raises:
        InvalidDateFormatError: ``value`` is text that cannot be parsed.

    Example:
        >>> from datetime import date
        >>> convert(date(2024, 10, 19)).month
        7
    """
    return default_calendar().convert(value)


def convert_today() -> SoraniDate:
    """Convert the host's current date."""
    return default_calendar().now()


def format_date(value: SoraniDate, style: DateStyle | str = DateStyle.FULL) -> str:
    """Render ``value`` in the ``full``, ``date`` or ``short`` layout."""
    return calendar.format_sorani_date(value, style)


def is_leap_year(year: int) -> bool:
    """Return True when ``year`` is a Gregorian leap year."""
    return calendar.is_leap_year(year)


def get_month_names() -> dict[int, str]:
    """Return a copy of the month-name table keyed 1..12."""
    return calendar.month_names()


def get_day_names() -> dict[int, str]:
    """Return a copy of the day-name table keyed 0..6 (0=Sunday)."""
    return calendar.day_names()


__all__ = [
    "convert",
    "convert_today",
    "default_calendar",
    "format_date",
    "get_day_names",
    "get_month_names",
    "is_leap_year",
]
