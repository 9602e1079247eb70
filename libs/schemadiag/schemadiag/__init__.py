"""Diagnostic report model and renderer for the schema compiler."""

from schemadiag.checks import check_schema
from schemadiag.diagnostics import (
    Annotation,
    ClassifierConfigurationError,
    PartBuilder,
    RenderError,
    Report,
    ReportPart,
    Severity,
    Span,
    SpanOutOfBounds,
)
from schemadiag.highlight import Classifier, build_classifier, load_theme
from schemadiag.render import (
    AnsiBackend,
    PlainTextBackend,
    Renderer,
    SourceView,
    display_range,
    format_views,
    render,
)

__all__ = [
    "Span",
    "Severity",
    "Annotation",
    "ReportPart",
    "Report",
    "PartBuilder",
    "RenderError",
    "SpanOutOfBounds",
    "ClassifierConfigurationError",
    "Classifier",
    "build_classifier",
    "load_theme",
    "Renderer",
    "SourceView",
    "display_range",
    "render",
    "PlainTextBackend",
    "AnsiBackend",
    "format_views",
    "check_schema",
]
