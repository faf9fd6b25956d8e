"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml``; keep both in sync when releasing.

Contents:
    * Metadata constants (``name``, ``title``, ``version`` and friends).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "sorani_calendar"
#: Human-readable summary shown in CLI help output.
title = "Gregorian to Sorani Kurdish calendar conversion"
#: Current release version pulled from pyproject.toml by the release tooling.
version = "1.0.0"
#: Console-script name published by the package.
shell_command = "sorani-calendar"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "bitranox"
#: Application display name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "Sorani Calendar"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "sorani-calendar"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for sorani_calendar:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
