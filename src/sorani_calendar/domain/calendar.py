"""Gregorian to Sorani Kurdish calendar conversion.

Pure domain functions with no I/O or framework dependencies. The Sorani
calendar shares its month structure with the Jalali (Persian solar)
calendar; years are counted from a different epoch, 1321 years ahead of
the Jalali numbering.

Contents:
    * :class:`SoraniDate` - Immutable converted date record.
    * :func:`gregorian_to_sorani` - Core day-count arithmetic.
    * :func:`to_sorani_date` - Convert a :class:`datetime.date`.
    * :func:`format_sorani_date` - Render a date in one of the text layouts.
    * :func:`is_leap_year` - Gregorian leap-year rule.
    * :func:`month_names` / :func:`day_names` - Copies of the label tables.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Final

from .enums import DateStyle

MONTH_NAMES: Final[Mapping[int, str]] = MappingProxyType(
    {
        1: "خاکه‌لێوه",
        2: "گوڵان",
        3: "جۆزه‌ردان",
        4: "پووشپه‌ڕ",
        5: "گه‌لاوێژ",
        6: "خه‌رمانان",
        7: "ره‌زبه‌ر",
        8: "خه‌زه‌ڵوه‌ر",
        9: "سه‌رماوه‌ز",
        10: "به‌فرانبار",
        11: "رێبه‌ندان",
        12: "ره‌شه‌مێ",
    }
)

#: Weekday labels keyed 0=Sunday .. 6=Saturday.
DAY_NAMES: Final[Mapping[int, str]] = MappingProxyType(
    {
        0: "یه‌کشه‌ممه",
        1: "دووشه‌ممه",
        2: "سێشەممه",
        3: "چوارشه‌ممه",
        4: "پێنجشه‌ممه",
        5: "هه‌ینی",
        6: "شه‌ممه",
    }
)

#: Non-leap Gregorian month lengths; index 0 is a sentinel so a slice
#: ``[0:month]`` sums the days of every month before ``month``.
GREGORIAN_MONTH_DAYS: Final[tuple[int, ...]] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

#: Offset between Jalali and Sorani Kurdish year numbering.
SORANI_YEAR_OFFSET: Final[int] = 1321

_DAYS_IN_33_YEAR_CYCLE: Final[int] = 12053
_DAYS_IN_4_YEAR_CYCLE: Final[int] = 1461


@dataclass(frozen=True, slots=True)
class SoraniDate:
    """A date in the Sorani Kurdish calendar.

    Attributes:
        day: Day of the month.
        month: Month number, 1 to 12.
        year: Sorani Kurdish year.
        month_name: Sorani label for ``month``.
        day_name: Sorani label for the weekday of the source date.

    Example:
        >>> d = SoraniDate(day=2, month=1, year=2724, month_name="خاکه‌لێوه", day_name="پێنجشه‌ممه")
        >>> d.as_dict()["year"]
        2724
    """

    day: int
    month: int
    year: int
    month_name: str
    day_name: str

    def as_dict(self) -> dict[str, int | str]:
        """Return the record as a plain dictionary (JSON friendly)."""
        return {
            "day": self.day,
            "month": self.month,
            "year": self.year,
            "month_name": self.month_name,
            "day_name": self.day_name,
        }


def _remainder(dividend: int, divisor: int) -> int:
    """Remainder that keeps the sign of the dividend.

    Differs from Python's ``%`` only for negative day counts, which arise
    for Gregorian years before 622.

    Examples:
        >>> _remainder(10, 3)
        1
        >>> _remainder(-10, 3)
        -1
    """
    return int(math.fmod(dividend, divisor))


def month_name(month: int) -> str:
    """Return the Sorani label for ``month``, or ``""`` when out of range.

    Examples:
        >>> month_name(1) == MONTH_NAMES[1]
        True
        >>> month_name(13)
        ''
    """
    return MONTH_NAMES.get(month, "")


def day_name(weekday: int) -> str:
    """Return the Sorani label for a weekday index (0=Sunday).

    The index is reduced modulo 7 first.

    Example:
        >>> day_name(7) == day_name(0)
        True
    """
    return DAY_NAMES.get(weekday % 7, "")


def sunday_based_weekday(value: date) -> int:
    """Return the weekday of ``value`` counted 0=Sunday .. 6=Saturday.

    Example:
        >>> sunday_based_weekday(date(2024, 3, 24))
        0
    """
    return value.isoweekday() % 7


def gregorian_to_sorani(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Convert a Gregorian triple to a ``(year, month, day)`` Sorani triple.

    Follows the classic Gregorian to Jalali day-count algorithm: shift to
    an epoch, count days, peel off 33-year and 4-year cycles, then place
    the remainder in the 31-day first half or 30-day second half of the
    year. The month-length table never carries a leap day; ``gy2``
    accounts for it instead.

    The year counter is advanced by ``floor((days - 1) / 365)`` even when
    ``days`` is 0, so a date that lands exactly on a four-year cycle
    boundary reports the previous year. The behaviour is kept as is.

    Args:
        year: Gregorian year.
        month: Gregorian month, 1 to 12.
        day: Gregorian day of month.

    Returns:
        Sorani ``(year, month, day)``.

    Examples:
        >>> gregorian_to_sorani(2024, 3, 21)
        (2724, 1, 2)
        >>> gregorian_to_sorani(2024, 10, 19)
        (2724, 7, 28)
    """
    if year > 1600:
        sorani_year = 979
        year -= 1600
    else:
        sorani_year = 0
        year -= 621

    gy2 = year + 1 if month > 2 else year

    days = (
        365 * year
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        - 80
        + day
        + sum(GREGORIAN_MONTH_DAYS[:month])
    )

    sorani_year += 33 * (days // _DAYS_IN_33_YEAR_CYCLE)
    days = _remainder(days, _DAYS_IN_33_YEAR_CYCLE)

    sorani_year += 4 * (days // _DAYS_IN_4_YEAR_CYCLE)
    days = _remainder(days, _DAYS_IN_4_YEAR_CYCLE)

    sorani_year += (days - 1) // 365
    if days > 365:
        days = _remainder(days - 1, 365)

    if days < 186:
        sorani_month = 1 + days // 31
        sorani_day = 1 + _remainder(days, 31)
    else:
        sorani_month = 7 + (days - 186) // 30
        sorani_day = 1 + _remainder(days - 186, 30)

    return sorani_year + SORANI_YEAR_OFFSET, sorani_month, sorani_day


def to_sorani_date(value: date) -> SoraniDate:
    """Convert a Gregorian :class:`datetime.date` into a :class:`SoraniDate`.

    Example:
        >>> to_sorani_date(date(2024, 3, 21)).day_name == DAY_NAMES[4]
        True
    """
    sorani_year, sorani_month, sorani_day = gregorian_to_sorani(value.year, value.month, value.day)
    return SoraniDate(
        day=sorani_day,
        month=sorani_month,
        year=sorani_year,
        month_name=month_name(sorani_month),
        day_name=day_name(sunday_based_weekday(value)),
    )


def format_sorani_date(value: SoraniDate, style: DateStyle | str = DateStyle.FULL) -> str:
    """Render ``value`` as text.

    Unknown styles fall back to the ``date`` layout.

    Examples:
        >>> d = SoraniDate(day=2, month=1, year=2724, month_name="خاکه‌لێوه", day_name="پێنجشه‌ممه")
        >>> format_sorani_date(d, "short")
        '2/1/2724'
        >>> format_sorani_date(d, "nonsense") == format_sorani_date(d, DateStyle.DATE)
        True
    """
    if style == DateStyle.FULL:
        return f"{value.day_name}، {value.day} {value.month_name} {value.year}"
    if style == DateStyle.SHORT:
        return f"{value.day}/{value.month}/{value.year}"
    return f"{value.day} {value.month_name} {value.year}"


def is_leap_year(year: int) -> bool:
    """Return True when ``year`` is a Gregorian leap year.

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def month_names() -> dict[int, str]:
    """Return a copy of the month-name table keyed 1..12."""
    return dict(MONTH_NAMES)


def day_names() -> dict[int, str]:
    """Return a copy of the day-name table keyed 0..6 (0=Sunday)."""
    return dict(DAY_NAMES)


__all__ = [
    "DAY_NAMES",
    "GREGORIAN_MONTH_DAYS",
    "MONTH_NAMES",
    "SORANI_YEAR_OFFSET",
    "SoraniDate",
    "day_name",
    "day_names",
    "format_sorani_date",
    "gregorian_to_sorani",
    "is_leap_year",
    "month_name",
    "month_names",
    "sunday_based_weekday",
    "to_sorani_date",
]
