"""Output backends: turn source views into text.

Backends are swappable; the renderer never formats text itself.  Both
backends share one layout::

    error: duplicate table
      |
    1 | table A { x; }; table A { x; };
      |       ^ duplicate table: first definition here
      |                       ^ duplicate table: redefined here
"""

from __future__ import annotations

import io
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol

from rich.cells import cell_len
from rich.color import Color
from rich.console import Console
from rich.style import Style as RichStyle
from rich.text import Text

from schemadiag.render.style import CAPTION_COLOR, Style, style_for
from schemadiag.render.view import Marker, SourceView

UNDERLINE_CHARS = {Style.ERROR: "^", Style.WARNING: "-"}
TAB_WIDTH = 8


class OutputBackend(Protocol):
    """Tool-agnostic interface for presenting source views."""

    name: str

    def format(self, view: SourceView) -> str:
        """Return the text representation of *view*."""
        ...


@dataclass(frozen=True)
class Row:
    """One output line of the shared snippet layout."""

    kind: str  # header | rule | code | marker | gap
    gutter: str = ""
    text: str = ""
    line: int = 0
    offset: int = 0
    marker: Marker | None = None


def columns(line: str) -> list[int]:
    """Terminal column where each character of *line* starts, then the line width.

    Tabs advance to the next multiple of TAB_WIDTH; wide characters take two cells.
    """
    cols = [0]
    for ch in line:
        col = cols[-1]
        cols.append(col + (TAB_WIDTH - col % TAB_WIDTH if ch == "\t" else cell_len(ch)))
    return cols


def expand_tabs(line: str) -> str:
    """Replace tabs with the spaces :func:`columns` assumes."""
    cols = columns(line)
    return "".join(" " * (cols[i + 1] - cols[i]) if ch == "\t" else ch for i, ch in enumerate(line))


def layout(view: SourceView) -> Iterator[Row]:
    """Yield the rows of a view: header, then each touched line with its markers.

    Code rows carry the raw line; marker rows are already laid out in columns.
    """
    yield Row("header", text=f"{view.severity}: {view.message}")
    lines = view.lines_touched()
    if not lines:
        return
    width = len(str(lines[-1]))
    blank = " " * width
    yield Row("rule", gutter=blank)
    prev = None
    for line in lines:
        if prev is not None and line > prev + 1:
            yield Row("gap", gutter="." * width)
        prev = line
        start, end = view.line_bounds(line)
        raw = view.text[start:end]
        cols = columns(raw)
        yield Row("code", gutter=str(line).rjust(width), text=raw, line=line, offset=start)
        for m in view.markers:
            if m.range.start > end or m.range.end < start:
                continue
            seg_start = max(m.range.start, start)
            seg_end = m.range.end if m.range.end <= end else max(end - 1, seg_start)
            lo = cols[seg_start - start]
            hi = cols[min(seg_end - start + 1, len(cols) - 1)]
            underline = " " * lo + UNDERLINE_CHARS[m.style] * max(hi - lo, 1)
            yield Row("marker", gutter=blank, text=underline, line=line, offset=start, marker=m)


def _caption(marker: Marker, line: int, view: SourceView) -> str:
    """Captions go on the last line a marker touches."""
    last, _ = view.line_col(marker.range.end)
    return marker.caption if last == line else ""


class PlainTextBackend:
    """Uncolored text, suitable for logs and tests."""

    name = "plain"

    def format(self, view: SourceView) -> str:
        out: list[str] = []
        for row in layout(view):
            if row.kind == "header":
                out.append(row.text)
            elif row.kind in ("rule", "gap"):
                out.append(f"{row.gutter} |")
            elif row.kind == "code":
                out.append(f"{row.gutter} | {expand_tabs(row.text)}".rstrip())
            elif row.marker is not None:
                caption = _caption(row.marker, row.line, view)
                out.append(f"{row.gutter} | {row.text} {caption}".rstrip())
        return "\n".join(out)


class AnsiBackend:
    """Terminal output with syntax coloring, rendered through rich."""

    name = "ansi"

    _MARKER_STYLES = {
        Style.ERROR: RichStyle(color="red", bold=True),
        Style.WARNING: RichStyle(color="yellow", bold=True),
    }
    _GUTTER_STYLE = RichStyle(color="blue", bold=True)

    def __init__(self, color_system: str = "truecolor") -> None:
        self._color_system = color_system

    def _code(self, row: Row, view: SourceView) -> Text:
        # Character index of each raw character once tabs are expanded
        cols = columns(row.text)
        index = [0]
        for i, ch in enumerate(row.text):
            index.append(index[-1] + (cols[i + 1] - cols[i] if ch == "\t" else 1))
        text = Text(expand_tabs(row.text))
        for h in view.highlights:
            if h.color is None:
                continue
            lo = max(h.start - row.offset, 0)
            hi = min(h.end - row.offset, len(row.text))
            if lo < hi:
                text.stylize(RichStyle(color=Color.from_rgb(*h.color)), index[lo], index[hi])
        text.rstrip()
        return text

    def _row(self, row: Row, view: SourceView) -> Text:
        if row.kind == "header":
            severity, _, message = row.text.partition(": ")
            head = self._MARKER_STYLES[style_for(view.severity)]
            return Text.assemble((severity, head), ": ", (message, RichStyle(bold=True)))
        out = Text.assemble((f"{row.gutter} |", self._GUTTER_STYLE))
        if row.kind == "code":
            out.append(" ")
            out.append_text(self._code(row, view))
        elif row.marker is not None:
            out.append(" ")
            out.append(row.text, self._MARKER_STYLES[row.marker.style])
            caption = _caption(row.marker, row.line, view)
            if caption:
                out.append(" ")
                out.append(caption, RichStyle(color=Color.from_rgb(*CAPTION_COLOR)))
        return out

    def format(self, view: SourceView) -> str:
        buf = io.StringIO()
        console = Console(
            file=buf,
            force_terminal=True,
            color_system=self._color_system,
            highlight=False,
            no_color=False,
            soft_wrap=True,
            width=max(80, max((cell_len(expand_tabs(line)) for line in view.text.splitlines()), default=0) + 200),
        )
        for row in layout(view):
            console.print(self._row(row, view))
        return buf.getvalue().rstrip("\n")


def format_views(views: Iterable[SourceView], backend: OutputBackend) -> str:
    """Format *views* with *backend*, separated by blank lines."""
    return "\n\n".join(backend.format(v) for v in views)
