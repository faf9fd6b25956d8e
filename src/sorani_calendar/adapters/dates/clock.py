"""System clock adapter."""

from __future__ import annotations

from datetime import date


def today_local() -> date:
    """Return today's date from the host's local clock.

    Example:
        >>> isinstance(today_local(), date)
        True
    """
    return date.today()


__all__ = ["today_local"]
