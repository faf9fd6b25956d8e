"""CLI package providing the command-line interface.

Re-exports the public symbols of its submodules so consumers stay insulated
from internal module boundaries.

Contents:
    * Click context helpers and traceback state management from :mod:`.context`
    * Root command group from :mod:`.root`
    * Entry point from :mod:`.main`
    * All command functions from :mod:`.commands`
"""

from __future__ import annotations

from .commands import (
    cli_config,
    cli_convert,
    cli_day_names,
    cli_info,
    cli_leap_year,
    cli_month_names,
    cli_today,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_config",
    "cli_convert",
    "cli_day_names",
    "cli_info",
    "cli_leap_year",
    "cli_month_names",
    "cli_today",
]
