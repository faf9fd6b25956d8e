"""Deterministic clock for tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(slots=True)
class FrozenClock:
    """Callable clock that always reports the same date and counts reads.

    Example:
        >>> clock = FrozenClock(date(2024, 3, 21))
        >>> clock()
        datetime.date(2024, 3, 21)
        >>> clock.reads
        1
    """

    today: date = date(2024, 3, 21)
    reads: int = field(default=0, init=False)

    def __call__(self) -> date:
        self.reads += 1
        return self.today


__all__ = ["FrozenClock"]
