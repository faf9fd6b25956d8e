"""Conversion use cases built on the pure calendar domain.

:class:`SoraniCalendar` resolves the accepted input shapes (nothing, text,
a ``date`` or ``datetime``) into one ``date`` and hands it to the domain
arithmetic. The clock and the text parser are injected ports so the
service stays deterministic under test.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

from ..domain import calendar
from ..domain.calendar import SoraniDate
from ..domain.enums import DateStyle
from .ports import ParseDate, Today

logger = logging.getLogger(__name__)

DateInput = date | datetime | str | None
"""Input shapes accepted by :meth:`SoraniCalendar.convert`."""


@dataclass(frozen=True, slots=True)
class SoraniCalendar:
    """Gregorian to Sorani Kurdish calendar converter.

    Attributes:
        today: Port returning the current date; read only when no date is given.
        parse_date: Port turning text into a date.

    Example:
        >>> from sorani_calendar.adapters.dates import parse_iso_date
        >>> from sorani_calendar.adapters.memory import FrozenClock
        >>> service = SoraniCalendar(today=FrozenClock(date(2024, 3, 21)), parse_date=parse_iso_date)
        >>> service.format(service.now(), "short")
        '2/1/2724'
    """

    today: Today
    parse_date: ParseDate

    def now(self) -> SoraniDate:
        """Convert the current date."""
        return self.convert(None)

    def convert(self, value: DateInput = None) -> SoraniDate:
        """Convert ``value`` to the Sorani calendar.

        Args:
            value: ``None`` for today, ISO-8601 text, or a ``date``/``datetime``.

        Returns:
            The converted date.

        Raises:
            InvalidDateFormatError: ``value`` is text that cannot be parsed.
            TypeError: ``value`` is of an unsupported type.
        """
        gregorian = self._resolve(value)
        result = calendar.to_sorani_date(gregorian)
        logger.debug(
            "Converted Gregorian date",
            extra={"gregorian": gregorian.isoformat(), "sorani": result.as_dict()},
        )
        return result

    def _resolve(self, value: DateInput) -> date:
        if value is None:
            return self.today()
        if isinstance(value, str):
            return self.parse_date(value)
        # datetime is a date subclass; check it first
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        raise TypeError(f"Unsupported date input of type {type(value).__name__}")

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Return True when ``year`` is a Gregorian leap year."""
        return calendar.is_leap_year(year)

    @staticmethod
    def format(value: SoraniDate, style: DateStyle | str = DateStyle.FULL) -> str:
        """Render ``value`` in the ``full``, ``date`` or ``short`` layout."""
        return calendar.format_sorani_date(value, style)

    @staticmethod
    def month_names() -> dict[int, str]:
        """Return a copy of the month-name table."""
        return calendar.month_names()

    @staticmethod
    def day_names() -> dict[int, str]:
        """Return a copy of the day-name table, 0 = Sunday."""
        return calendar.day_names()


__all__ = [
    "DateInput",
    "SoraniCalendar",
]
