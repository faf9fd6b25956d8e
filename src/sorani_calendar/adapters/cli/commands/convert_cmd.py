"""Date conversion commands.

Contents:
    * :func:`cli_today` - Convert the current date.
    * :func:`cli_convert` - Convert an ISO-8601 date given on the command line.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from sorani_calendar.domain.errors import InvalidDateFormatError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import echo_sorani_date, format_option, resolve_style, style_option

logger = logging.getLogger(__name__)


@click.command("today", context_settings=CLICK_CONTEXT_SETTINGS)
@style_option
@format_option
@click.pass_context
def cli_today(ctx: click.Context, style: str | None, output_format: str) -> None:
    """Print today's date in the Sorani Kurdish calendar."""
    cli_ctx = get_cli_context(ctx)
    effective_style = resolve_style(cli_ctx, style)

    with lib_log_rich.runtime.bind(job_id="cli-today", extra={"command": "today", "style": effective_style.value}):
        result = cli_ctx.services.calendar().now()
        logger.info("Converted current date", extra={"sorani": result.as_dict()})
        echo_sorani_date(result, effective_style, output_format)


@click.command("convert", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("date_text", metavar="DATE")
@style_option
@format_option
@click.pass_context
def cli_convert(ctx: click.Context, date_text: str, style: str | None, output_format: str) -> None:
    r"""Convert a Gregorian DATE to the Sorani Kurdish calendar.

    DATE is ISO-8601 text; a time or offset part is accepted and ignored.

    \b
    Examples:
      sorani-calendar convert 2024-03-21
      sorani-calendar convert 2024-10-19 --style short --format json
    """
    cli_ctx = get_cli_context(ctx)
    effective_style = resolve_style(cli_ctx, style)

    extra = {"command": "convert", "date": date_text, "style": effective_style.value}
    with lib_log_rich.runtime.bind(job_id="cli-convert", extra=extra):
        try:
            result = cli_ctx.services.calendar().convert(date_text)
        except InvalidDateFormatError as exc:
            logger.error("Rejected date text", extra={"date": date_text})
            click.echo(f"\nError: {exc}", err=True)
            click.echo("Hint: use ISO-8601, e.g. 2024-03-21.", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        logger.info("Converted date", extra={"sorani": result.as_dict()})
        echo_sorani_date(result, effective_style, output_format)


__all__ = ["cli_convert", "cli_today"]
