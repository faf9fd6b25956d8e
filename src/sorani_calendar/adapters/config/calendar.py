"""Calendar settings model and loader.

Provides the CalendarConfig Pydantic model for the ``[sorani_calendar]``
section and the loader that builds it from a merged configuration mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from sorani_calendar.domain.enums import DateStyle
from sorani_calendar.domain.errors import ConfigurationError

SECTION = "sorani_calendar"


class CalendarConfig(BaseModel):
    """Validated, immutable calendar settings.

    Example:
        >>> CalendarConfig(default_style="SHORT").default_style
        <DateStyle.SHORT: 'short'>
        >>> CalendarConfig().default_style
        <DateStyle.FULL: 'full'>
    """

    model_config = ConfigDict(frozen=True)

    default_style: DateStyle = DateStyle.FULL

    @field_validator("default_style", mode="before")
    @classmethod
    def _normalise_style(cls, v: Any) -> Any:
        """Accept style names in any case, with surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_calendar_config(config_dict: Mapping[str, Any]) -> CalendarConfig:
    """Build CalendarConfig from the ``[sorani_calendar]`` section.

    Args:
        config_dict: Merged configuration mapping, typically ``Config.as_dict()``.

    Returns:
        Validated settings; defaults for anything not configured.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_calendar_config({"sorani_calendar": {"default_style": "date"}}).default_style.value
        'date'
        >>> load_calendar_config({}).default_style.value
        'full'
    """
    section: Any = config_dict.get(SECTION, {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[{SECTION}] must be a table, got {type(section).__name__}")
    try:
        return CalendarConfig.model_validate(dict(section))
    except ValidationError as exc:
        allowed = ", ".join(s.value for s in DateStyle)
        raise ConfigurationError(f"Invalid [{SECTION}] configuration (default_style must be one of {allowed}): {exc}") from exc


__all__ = [
    "CalendarConfig",
    "load_calendar_config",
]
