"""Configuration display - delegates to lib_layered_config.

Pending log records are flushed first so they do not interleave with the
rendered configuration.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from sorani_calendar.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render ``config`` as TOML-like text or JSON.

    Args:
        config: Loaded layered configuration.
        output_format: Human-readable or JSON output.
        section: Only show this top-level section when given.
        console: Rich console to write to; the library default when None.
        profile: Profile name shown in provenance comments.

    Raises:
        ValueError: If ``section`` does not exist in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
