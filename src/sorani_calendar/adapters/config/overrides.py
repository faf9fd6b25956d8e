"""``--set SECTION.KEY=VALUE`` overrides applied on top of the loaded Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values an override string can decode to."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` entry."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue


def coerce_value(raw: str) -> OverrideValue:
    """Decode ``raw`` as JSON, keeping the plain text when that fails.

    Examples:
        >>> coerce_value("short")
        'short'
        >>> coerce_value("false")
        False
        >>> coerce_value("[1, 2]")
        [1, 2]
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The text is split on the first ``=``; the left side on dots.

    Raises:
        ValueError: If ``=`` is missing, the key has no dot, or any
            dotted component is empty.

    Examples:
        >>> parse_override("sorani_calendar.default_style=short")
        ConfigOverride(section='sorani_calendar', key_path=('default_style',), value='short')
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _merge_into(tree: dict[str, object], override: ConfigOverride) -> None:
    node = tree
    for part in (override.section, *override.key_path[:-1]):
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise ValueError(f"Cannot set {'.'.join((override.section, *override.key_path))}: {part!r} is not a table")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` entry deep-merged in.

    Later entries win over earlier ones for the same key. The original
    Config is returned untouched when there is nothing to apply.

    Raises:
        ValueError: If any entry is malformed.

    Example:
        >>> cfg = Config({"sorani_calendar": {"default_style": "full"}}, {})
        >>> apply_overrides(cfg, ("sorani_calendar.default_style=short",))["sorani_calendar"]["default_style"]
        'short'
    """
    if not raw_overrides:
        return config
    tree: dict[str, object] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
