"""Report rendering (depends on diagnostics, highlight)."""

from schemadiag.render.backends import AnsiBackend, OutputBackend, PlainTextBackend, format_views, layout
from schemadiag.render.ranges import DisplayRange, check_bounds, display_range, to_chars
from schemadiag.render.renderer import PADDING, Renderer, render, render_part
from schemadiag.render.style import CAPTION_COLOR, Style, style_for
from schemadiag.render.view import Marker, SourceView

__all__ = [
    "DisplayRange",
    "display_range",
    "check_bounds",
    "to_chars",
    "Style",
    "style_for",
    "CAPTION_COLOR",
    "Marker",
    "SourceView",
    "PADDING",
    "render",
    "render_part",
    "Renderer",
    "OutputBackend",
    "PlainTextBackend",
    "AnsiBackend",
    "layout",
    "format_views",
]
