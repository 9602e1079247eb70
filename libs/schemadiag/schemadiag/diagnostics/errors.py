"""Failures raised while rendering or highlighting diagnostics."""

from __future__ import annotations

from schemadiag.diagnostics.span import Span


class RenderError(Exception):
    """Raised when a report cannot be rendered against its source."""


class SpanOutOfBounds(RenderError):
    """An annotation points outside the (padded) source buffer."""

    def __init__(self, span: Span, length: int) -> None:
        super().__init__(f"span {span} is out of bounds for source of length {length}")
        self.span = span
        self.length = length


class ClassifierConfigurationError(Exception):
    """The syntax-highlighting configuration is invalid or unavailable."""
