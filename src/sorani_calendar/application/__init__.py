"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.converter` - The :class:`SoraniCalendar` conversion service
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .converter import DateInput, SoraniCalendar
from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    ParseDate,
    Today,
)

__all__ = [
    "DateInput",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "ParseDate",
    "SoraniCalendar",
    "Today",
]
