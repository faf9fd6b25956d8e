"""Lookup commands for month names, day names, and leap years.

Contents:
    * :func:`cli_month_names` / :func:`cli_day_names` - Print the label tables.
    * :func:`cli_leap_year` - Gregorian leap-year check.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from sorani_calendar.domain.calendar import day_names, is_leap_year, month_names
from sorani_calendar.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ._shared import echo_json, format_option

logger = logging.getLogger(__name__)


def _echo_table(table: dict[int, str], output_format: str) -> None:
    if OutputFormat(output_format.lower()) is OutputFormat.JSON:
        echo_json(table)
        return
    for number, label in table.items():
        click.echo(f"{number:>2}  {label}")


@click.command("month-names", context_settings=CLICK_CONTEXT_SETTINGS)
@format_option
def cli_month_names(output_format: str) -> None:
    """List the twelve Sorani month names."""
    with lib_log_rich.runtime.bind(job_id="cli-month-names", extra={"command": "month-names"}):
        logger.info("Listing month names")
        _echo_table(month_names(), output_format)


@click.command("day-names", context_settings=CLICK_CONTEXT_SETTINGS)
@format_option
def cli_day_names(output_format: str) -> None:
    """List the Sorani weekday names, 0 = Sunday."""
    with lib_log_rich.runtime.bind(job_id="cli-day-names", extra={"command": "day-names"}):
        logger.info("Listing day names")
        _echo_table(day_names(), output_format)


@click.command("leap-year", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("year", type=int)
@format_option
def cli_leap_year(year: int, output_format: str) -> None:
    """Tell whether a Gregorian YEAR is a leap year.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_leap_year, ["2024"]).output
        '2024 is a leap year\\n'
    """
    leap = is_leap_year(year)
    with lib_log_rich.runtime.bind(job_id="cli-leap-year", extra={"command": "leap-year", "year": year}):
        logger.info("Checked leap year", extra={"year": year, "leap": leap})
        if OutputFormat(output_format.lower()) is OutputFormat.JSON:
            echo_json({"year": year, "leap": leap})
        else:
            click.echo(f"{year} is a leap year" if leap else f"{year} is not a leap year")


__all__ = ["cli_day_names", "cli_leap_year", "cli_month_names"]
