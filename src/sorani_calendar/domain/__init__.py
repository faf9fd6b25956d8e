"""Domain layer - pure calendar logic with no I/O or framework dependencies.

Contents:
    * :mod:`.calendar` - Gregorian to Sorani conversion, formatting, name tables
    * :mod:`.enums` - Domain enumerations (DateStyle, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .calendar import (
    DAY_NAMES,
    MONTH_NAMES,
    SoraniDate,
    day_names,
    format_sorani_date,
    gregorian_to_sorani,
    is_leap_year,
    month_names,
    to_sorani_date,
)
from .enums import DateStyle, OutputFormat
from .errors import ConfigurationError, InvalidDateFormatError

__all__ = [
    # Calendar
    "DAY_NAMES",
    "MONTH_NAMES",
    "SoraniDate",
    "day_names",
    "format_sorani_date",
    "gregorian_to_sorani",
    "is_leap_year",
    "month_names",
    "to_sorani_date",
    # Enums
    "DateStyle",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidDateFormatError",
]
