"""Layered configuration loading for the Sorani calendar tools.

Configuration is merged by lib_layered_config in the order
defaults → app → host → user → dotenv → env, with the bundled
``defaultconfig.toml`` as the lowest layer.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from sorani_calendar import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Callable config loader that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration, cached per ``(profile, start_dir)``.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration path. Validated with
            ``lib_layered_config.validate_profile_name``.
        start_dir: Directory that seeds ``.env`` discovery. Defaults to the
            current working directory.

    Returns:
        Immutable configuration object with provenance tracking.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> config = get_config()
        >>> config.get("sorani_calendar.default_style")
        'full'
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return _read_layers(profile=profile, start_dir=start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
]
