"""Source spans for diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open range ``[start, end)`` of UTF-8 byte offsets into one source text.

    ``start == end`` marks an insertion point (e.g. "missing `;` here").
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if not isinstance(self.start, int) or not isinstance(self.end, int):
            raise ValueError(f"span offsets must be integers, got {self.start!r}..{self.end!r}")
        if self.start < 0:
            raise ValueError(f"span start must be non-negative, got {self.start}")
        if self.start > self.end:
            raise ValueError(f"span start {self.start} is after end {self.end}")

    @classmethod
    def at(cls, offset: int) -> Span:
        """Zero-width span pointing at *offset*."""
        return cls(offset, offset)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


def byte_offsets(text: str) -> list[int]:
    """UTF-8 byte offset of every character of *text*, followed by the total size."""
    offsets = [0]
    for ch in text:
        offsets.append(offsets[-1] + len(ch.encode("utf-8")))
    return offsets
