"""Report accumulation for compiler passes.

A :class:`Report` is threaded through every pass of a processing phase.  Passes
open a part with :meth:`Report.error` (or :meth:`Report.warning`) and attach
annotations through the returned :class:`PartBuilder`::

    report.error("duplicate table") \\
        .annotate("first definition here", first) \\
        .annotate("redefined here", second)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from schemadiag.diagnostics.severity import Severity
from schemadiag.diagnostics.span import Span


@dataclass(frozen=True)
class Annotation:
    """A message anchored to one span of the source."""

    span: Span
    msg: str


@dataclass(frozen=True)
class ReportPart:
    """One logical diagnostic: headline, severity, and its annotations.

    Parts are immutable; annotating replaces the part held by the report.
    """

    msg: str
    severity: Severity
    annotations: tuple[Annotation, ...] = ()

    def __str__(self) -> str:
        return f"{self.severity}: {self.msg}"


class PartBuilder:
    """Attaches annotations to the part it was created for.

    The builder remembers the index of its part, so it keeps pointing at the
    same diagnostic even if more parts are appended meanwhile.
    """

    def __init__(self, report: Report, index: int) -> None:
        self._report = report
        self._index = index

    @property
    def part(self) -> ReportPart:
        return self._report._parts[self._index]

    def annotate(self, msg: str, span: Span) -> PartBuilder:
        """Point at *span* with *msg*; returns the builder for chaining."""
        part = self.part
        self._report._parts[self._index] = replace(part, annotations=part.annotations + (Annotation(span, msg),))
        return self


class Report:
    """Ordered log of diagnostics emitted during a processing phase."""

    def __init__(self) -> None:
        self._parts: list[ReportPart] = []

    def _open(self, msg: str, severity: Severity) -> PartBuilder:
        self._parts.append(ReportPart(msg, severity))
        return PartBuilder(self, len(self._parts) - 1)

    def error(self, msg: str) -> PartBuilder:
        """Open an error part."""
        return self._open(msg, Severity.ERROR)

    def warning(self, msg: str) -> PartBuilder:
        """Open a warning part."""
        return self._open(msg, Severity.WARNING)

    @property
    def parts(self) -> tuple[ReportPart, ...]:
        return tuple(self._parts)

    def is_error(self) -> bool:
        """Return True if any error part has been recorded."""
        return any(p.severity == Severity.ERROR for p in self._parts)

    def severity(self) -> Severity | None:
        """Return the highest severity recorded, or None for an empty report."""
        return Severity.highest(p.severity for p in self._parts)

    def errors(self) -> list[ReportPart]:
        return [p for p in self._parts if p.severity == Severity.ERROR]

    def warnings(self) -> list[ReportPart]:
        return [p for p in self._parts if p.severity == Severity.WARNING]

    def format_all(self) -> str:
        """Format all parts as a newline-separated summary."""
        return "\n".join(str(p) for p in self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[ReportPart]:
        return iter(tuple(self._parts))
