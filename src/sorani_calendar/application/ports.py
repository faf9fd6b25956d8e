"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Module-level adapter functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so the application layer carries no
    runtime dependency on lib_layered_config.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class Today(Protocol):
    """Return the current calendar date."""

    def __call__(self) -> date: ...


class ParseDate(Protocol):
    """Parse text into a calendar date, raising InvalidDateFormatError on failure."""

    def __call__(self, text: str) -> date: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "ParseDate",
    "Today",
]
