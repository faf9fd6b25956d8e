"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidDateFormatError(ValueError):
    """Text could not be parsed into a calendar date.

    Inherits from ValueError so generic ``except ValueError`` handlers
    still see it. The rejected input is kept on :attr:`text`.

    Example:
        >>> from sorani_calendar.domain.errors import InvalidDateFormatError
        >>> err = InvalidDateFormatError("not-a-date")
        >>> err.text
        'not-a-date'
        >>> str(err)
        "Invalid date format: 'not-a-date'"
    """

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date format: {text!r}")
        self.text = text


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[sorani_calendar]`` section holds values that cannot
    be used. Caught at CLI boundaries to provide user-friendly messages.

    Example:
        >>> from sorani_calendar.domain.errors import ConfigurationError
        >>> str(ConfigurationError("default_style must be one of full, date, short"))
        'default_style must be one of full, date, short'
    """


__all__ = [
    "ConfigurationError",
    "InvalidDateFormatError",
]
