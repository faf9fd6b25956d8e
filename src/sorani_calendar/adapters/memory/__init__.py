"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that never touch the
filesystem, the host clock, or the logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.dates` - :class:`FrozenClock`
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .dates import FrozenClock
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from sorani_calendar.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        Today,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_today: Today = FrozenClock()

__all__ = [
    "FrozenClock",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
