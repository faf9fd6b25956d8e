"""Public package surface for Gregorian to Sorani Kurdish date conversion.

Routes imports through the architectural layers:
- Domain exports: the converted date record, styles, and errors
- Application exports: the :class:`SoraniCalendar` service
- Helper exports: module-level conversion functions with production wiring
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Helper exports (production-wired)
from .api import (
    convert,
    convert_today,
    format_date,
    get_day_names,
    get_month_names,
    is_leap_year,
)

# Application exports
from .application.converter import SoraniCalendar

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.calendar import SoraniDate
from .domain.enums import DateStyle
from .domain.errors import ConfigurationError, InvalidDateFormatError

__all__ = [
    "ConfigurationError",
    "DateStyle",
    "InvalidDateFormatError",
    "SoraniCalendar",
    "SoraniDate",
    "convert",
    "convert_today",
    "format_date",
    "get_config",
    "get_day_names",
    "get_month_names",
    "is_leap_year",
    "print_info",
]
