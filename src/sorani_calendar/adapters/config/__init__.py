"""Configuration adapter - loading, display, overrides, and calendar settings.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.calendar` - ``[sorani_calendar]`` section model
"""

from __future__ import annotations

from .calendar import CalendarConfig, load_calendar_config
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "CalendarConfig",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_calendar_config",
]
