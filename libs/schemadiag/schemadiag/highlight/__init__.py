"""Optional syntax highlighting for source views (depends on syntax, diagnostics)."""

from schemadiag.highlight.classifier import Classifier, Highlight, build_classifier
from schemadiag.highlight.theme import (
    CATEGORIES,
    DEFAULT_THEME,
    THEME_SCHEMA,
    coerce_theme,
    load_theme,
    validate_theme,
)

__all__ = [
    "Classifier",
    "Highlight",
    "build_classifier",
    "CATEGORIES",
    "DEFAULT_THEME",
    "THEME_SCHEMA",
    "coerce_theme",
    "load_theme",
    "validate_theme",
]
