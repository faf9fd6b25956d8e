"""Date adapters - system clock and ISO-8601 text parsing.

Contents:
    * :func:`.clock.today_local` - Current date from the host clock
    * :func:`.parsing.parse_iso_date` - ISO-8601 text to ``date``
"""

from __future__ import annotations

from .clock import today_local
from .parsing import parse_iso_date

__all__ = [
    "parse_iso_date",
    "today_local",
]
