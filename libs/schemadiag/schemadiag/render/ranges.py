"""Conversion from half-open spans to inclusive display ranges."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass

from schemadiag.diagnostics.errors import SpanOutOfBounds
from schemadiag.diagnostics.span import Span


@dataclass(frozen=True)
class DisplayRange:
    """Inclusive range ``[start, end]``: UTF-8 bytes of a span, or characters of a view."""

    start: int
    end: int

    def __contains__(self, offset: object) -> bool:
        return isinstance(offset, int) and self.start <= offset <= self.end

    def __len__(self) -> int:
        return self.end - self.start + 1


def display_range(span: Span) -> DisplayRange:
    """Map a span to the characters a marker should cover.

    A zero-width span ``[k, k)`` covers the single character ``k``, so a caret
    can point at an insertion point, including one just past the end of input.
    Any other span ``[a, b)`` covers ``[a, b - 1]``.
    """
    if span.is_empty:
        return DisplayRange(span.start, span.start)
    return DisplayRange(span.start, span.end - 1)


def check_bounds(rng: DisplayRange, length: int, span: Span) -> DisplayRange:
    """Return *rng* unchanged, or raise SpanOutOfBounds if it leaves a buffer of *length* bytes."""
    if rng.end >= length:
        raise SpanOutOfBounds(span, length)
    return rng


def to_chars(rng: DisplayRange, offsets: Sequence[int]) -> DisplayRange:
    """Map an inclusive byte range to the characters containing its bytes.

    *offsets* is the table built by :func:`byte_offsets` for the same text.
    """
    return DisplayRange(bisect_right(offsets, rng.start) - 1, bisect_right(offsets, rng.end) - 1)
