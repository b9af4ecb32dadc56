"""A closed range of calendar dates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Period:
    """Dates from ``start`` to ``end``, both inclusive."""

    start: date
    end: date

    def contains(self, date: date) -> bool:
        """Return True if ``date`` lies within the period."""
        return self.start <= date <= self.end