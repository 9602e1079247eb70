"""Diagnostic report model (no internal dependencies beyond this subpackage)."""

from schemadiag.diagnostics.errors import ClassifierConfigurationError, RenderError, SpanOutOfBounds
from schemadiag.diagnostics.report import Annotation, PartBuilder, Report, ReportPart
from schemadiag.diagnostics.severity import Severity
from schemadiag.diagnostics.span import Span, byte_offsets

__all__ = [
    "Span",
    "byte_offsets",
    "Severity",
    "Annotation",
    "ReportPart",
    "Report",
    "PartBuilder",
    "RenderError",
    "SpanOutOfBounds",
    "ClassifierConfigurationError",
]
