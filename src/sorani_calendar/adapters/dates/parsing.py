"""Text to date parsing adapter.

Accepts ISO-8601 calendar dates and date-times (``2024-03-21``,
``20240321``, ``2024-03-21T08:30:00+03:00``) via
:meth:`datetime.datetime.fromisoformat`. Any time or offset part is
dropped; the date is taken as written.
"""

from __future__ import annotations

from datetime import date, datetime

from sorani_calendar.domain.errors import InvalidDateFormatError


def parse_iso_date(text: str) -> date:
    """Parse ISO-8601 text into a :class:`datetime.date`.

    Args:
        text: Date or date-time text. Surrounding whitespace is ignored.

    Returns:
        The calendar date component.

    Raises:
        InvalidDateFormatError: If the text is not a valid ISO-8601 date.

    Examples:
        >>> parse_iso_date("2024-03-21")
        datetime.date(2024, 3, 21)
        >>> parse_iso_date(" 2024-03-21T23:59:00+03:00 ")
        datetime.date(2024, 3, 21)
        >>> parse_iso_date("not-a-date")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidDateFormatError: Invalid date format: 'not-a-date'
    """
    try:
        return datetime.fromisoformat(text.strip()).date()
    except ValueError as exc:
        raise InvalidDateFormatError(text) from exc


__all__ = ["parse_iso_date"]
