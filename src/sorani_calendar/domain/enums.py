"""Type-safe domain enums for date layouts and output formats."""

from __future__ import annotations

from enum import Enum


class DateStyle(str, Enum):
    """Text layouts for rendering a Sorani date.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        FULL: Weekday name, day, month name, and year.
        DATE: Day, month name, and year.
        SHORT: Numeric ``day/month/year``.

    Example:
        >>> DateStyle.SHORT.value
        'short'
        >>> DateStyle.FULL == "full"
        True
    """

    FULL = "full"
    DATE = "date"
    SHORT = "short"


class OutputFormat(str, Enum):
    """Output format options for CLI commands.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "DateStyle",
    "OutputFormat",
]
