"""Diagnostic severity levels."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from functools import total_ordering


@total_ordering
class Severity(Enum):
    """Severity level of a report part.

    Members are declared from least to most severe, so ``ERROR`` outranks
    ``WARNING``.
    """

    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return list(Severity).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def highest(severities: Iterable[Severity]) -> Severity | None:
        """Return the most severe level in *severities*, or None if empty."""
        return max(severities, key=lambda s: s.rank, default=None)
