"""Shared helpers for CLI command modules.

Contents:
    * :func:`style_option` / :func:`format_option` - Reusable Click options.
    * :func:`resolve_style` - Pick the ``--style`` value or the configured default.
    * :func:`echo_json` - Write a payload as indented UTF-8 JSON.
    * :func:`echo_sorani_date` - Render a converted date in the requested format.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import orjson
import rich_click as click

from sorani_calendar.adapters.config.calendar import load_calendar_config
from sorani_calendar.domain.calendar import SoraniDate, format_sorani_date
from sorani_calendar.domain.enums import DateStyle, OutputFormat
from sorani_calendar.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def style_option(func: F) -> F:
    """Add ``--style`` (defaulting to ``[sorani_calendar].default_style``)."""
    return click.option(
        "--style",
        type=click.Choice([s.value for s in DateStyle], case_sensitive=False),
        default=None,
        help="Text layout: full, date or short (default from configuration)",
    )(func)


def format_option(func: F) -> F:
    """Add ``--format human|json``."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
        default=OutputFormat.HUMAN.value,
        help="Output format (human-readable or JSON)",
    )(func)


def resolve_style(cli_ctx: CLIContext, style: str | None) -> DateStyle:
    """Return the explicit style, else the configured default.

    Raises:
        SystemExit: With ``CONFIG_ERROR`` when the configured default is invalid.
    """
    if style is not None:
        return DateStyle(style.lower())
    try:
        return load_calendar_config(cli_ctx.config.as_dict()).default_style
    except ConfigurationError as exc:
        logger.error("Invalid calendar configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def echo_json(payload: object) -> None:
    """Write ``payload`` as indented JSON; integer keys become strings."""
    click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS).decode("utf-8"))


def echo_sorani_date(result: SoraniDate, style: DateStyle, output_format: str) -> None:
    """Print ``result`` as formatted text, or as JSON with the text included."""
    text = format_sorani_date(result, style)
    if OutputFormat(output_format.lower()) is OutputFormat.JSON:
        echo_json({**result.as_dict(), "style": style.value, "formatted": text})
    else:
        click.echo(text)


__all__ = [
    "echo_json",
    "echo_sorani_date",
    "format_option",
    "resolve_style",
    "style_option",
]
