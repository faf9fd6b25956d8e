"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Conversion commands from :mod:`.convert_cmd`
    * Lookup commands from :mod:`.names_cmd`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .convert_cmd import cli_convert, cli_today
from .info import cli_info
from .names_cmd import cli_day_names, cli_leap_year, cli_month_names

__all__ = [
    "cli_config",
    "cli_convert",
    "cli_day_names",
    "cli_info",
    "cli_leap_year",
    "cli_month_names",
    "cli_today",
]
