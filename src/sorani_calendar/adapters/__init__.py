"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - rich-click command-line interface
    * :mod:`.config` - Configuration loading, display, and overrides
    * :mod:`.dates` - Host clock and ISO-8601 parsing
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
