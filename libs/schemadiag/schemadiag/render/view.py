"""Presentation-ready source views, one per report part."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field

from schemadiag.diagnostics.severity import Severity
from schemadiag.diagnostics.span import Span
from schemadiag.highlight.classifier import Highlight
from schemadiag.render.ranges import DisplayRange
from schemadiag.render.style import Style


@dataclass(frozen=True)
class Marker:
    """An annotated range with its composed caption.

    ``range`` indexes characters of the view text; ``span`` is the byte span
    it was built from.
    """

    range: DisplayRange
    caption: str
    style: Style
    span: Span


@dataclass(frozen=True)
class SourceView:
    """Source text overlaid with the markers of one report part.

    ``text`` is the padded working copy; marker and highlight ranges index its
    characters.
    """

    text: str
    message: str
    severity: Severity
    markers: tuple[Marker, ...] = ()
    highlights: tuple[Highlight, ...] = ()
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        starts.extend(i + 1 for i, ch in enumerate(self.text) if ch == "\n")
        object.__setattr__(self, "_line_starts", tuple(starts))

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_col(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of *offset*."""
        line = bisect_right(self._line_starts, offset)
        return line, offset - self._line_starts[line - 1] + 1

    def line_bounds(self, line: int) -> tuple[int, int]:
        """Return the half-open offsets of *line*, excluding its newline."""
        start = self._line_starts[line - 1]
        if line < len(self._line_starts):
            return start, self._line_starts[line] - 1
        return start, len(self.text)

    def line_text(self, line: int) -> str:
        start, end = self.line_bounds(line)
        return self.text[start:end]

    def lines_touched(self) -> list[int]:
        """Sorted line numbers covered by at least one marker."""
        lines: set[int] = set()
        for m in self.markers:
            first, _ = self.line_col(m.range.start)
            last, _ = self.line_col(m.range.end)
            lines.update(range(first, last + 1))
        return sorted(lines)
