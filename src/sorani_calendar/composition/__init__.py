"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# Date services
from ..adapters.dates import parse_iso_date, today_local

# Logging services
from ..adapters.logging.setup import init_logging
from ..application.converter import SoraniCalendar

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        ParseDate,
        Today,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_today: Today = today_local
    _assert_parse_date: ParseDate = parse_iso_date


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    today: Today
    parse_date: ParseDate

    def calendar(self) -> SoraniCalendar:
        """Return a converter bound to this container's clock and parser."""
        return SoraniCalendar(today=self.today, parse_date=self.parse_date)


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        today=today_local,
        parse_date=parse_iso_date,
    )


def build_testing(*, today: date | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        today: Date reported by the frozen clock. Defaults to
            2024-03-21 (Newroz).

    Returns:
        AppServices container with in-memory adapters. Text parsing uses
        the production ISO parser; it has no side effects.
    """
    from ..adapters.memory import (
        FrozenClock,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    clock = FrozenClock(today) if today is not None else FrozenClock()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        today=clock,
        parse_date=parse_iso_date,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Dates
    "parse_iso_date",
    "today_local",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
