"""Transform a report into source views."""

from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import replace

from schemadiag.diagnostics.errors import ClassifierConfigurationError
from schemadiag.diagnostics.report import Report, ReportPart
from schemadiag.diagnostics.span import byte_offsets
from schemadiag.highlight.classifier import Classifier, Highlight
from schemadiag.render.ranges import check_bounds, display_range, to_chars
from schemadiag.render.style import style_for
from schemadiag.render.view import Marker, SourceView

logger = logging.getLogger(__name__)

# Appended to the working text so an insertion point at end of input has a
# real character to point at.
PADDING = " "


def _highlights(classifier: Classifier | None, text: str, offsets: Sequence[int]) -> tuple[Highlight, ...]:
    """Classify *text* and move the byte ranges onto character indices."""
    if classifier is None:
        return ()
    try:
        found = classifier.classify(text)
    except ClassifierConfigurationError as e:
        logger.warning("rendering without highlighting: %s", e)
        return ()
    return tuple(
        replace(h, start=bisect_left(offsets, h.start), end=bisect_left(offsets, h.end)) for h in found
    )


def render_part(
    part: ReportPart,
    text: str,
    highlights: tuple[Highlight, ...] = (),
    offsets: Sequence[int] | None = None,
) -> SourceView:
    """Build the view of one part over an already padded *text*.

    Annotation spans are byte offsets; markers index characters of *text*.
    """
    if offsets is None:
        offsets = byte_offsets(text)
    size = offsets[-1]
    style = style_for(part.severity)
    markers = []
    for ann in part.annotations:
        rng = check_bounds(display_range(ann.span), size, ann.span)
        markers.append(Marker(to_chars(rng, offsets), f"{part.msg}: {ann.msg}", style, ann.span))
    return SourceView(text, part.msg, part.severity, tuple(markers), highlights)


def render(report: Report, source: str, classifier: Classifier | None = None) -> list[SourceView]:
    """Render every part of *report* against *source*, in report order.

    Raises SpanOutOfBounds if an annotation points past the padded source.
    """
    parts = report.parts
    if not parts:
        return []
    text = source + PADDING
    offsets = byte_offsets(text)
    highlights = _highlights(classifier, text, offsets)
    logger.debug("rendering %d part(s) over %d bytes", len(parts), offsets[-1])
    return [render_part(part, text, highlights, offsets) for part in parts]


class Renderer:
    """Renders reports with an optional classifier bound once."""

    def __init__(self, classifier: Classifier | None = None) -> None:
        self._classifier = classifier

    @property
    def highlighting(self) -> bool:
        return self._classifier is not None

    def render(self, report: Report, source: str) -> list[SourceView]:
        return render(report, source, self._classifier)
