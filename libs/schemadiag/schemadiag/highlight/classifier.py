"""Token classification for syntax coloring of source views."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from schemadiag.diagnostics.errors import ClassifierConfigurationError
from schemadiag.diagnostics.report import Report
from schemadiag.highlight.theme import Color, Theme, coerce_theme
from schemadiag.syntax.lexer import Lexer
from schemadiag.syntax.tokens import DECLARATION_KEYWORDS, Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Highlight:
    """A classified, half-open ``[start, end)`` range of the source.

    The classifier reports byte offsets; source views rebase them to characters.
    """

    start: int
    end: int
    category: str
    color: Color | None


class Classifier:
    """Labels source substrings with syntactic categories.

    Only categories present in the theme are emitted.  Lexing problems are
    collected into a private report and ignored: coloring is advisory.
    """

    def __init__(self, theme: Theme) -> None:
        self._theme = dict(theme)

    @property
    def theme(self) -> Theme:
        return dict(self._theme)

    def _category(self, tok: Token, prev: Token | None, depth: int) -> str | None:
        if tok.is_bracket:
            return "punctuation.bracket"
        if tok.is_keyword:
            return "keyword"
        if tok.kind == TokenKind.COMMENT:
            return "comment"
        if tok.kind == TokenKind.STRING_LIT:
            return "string"
        if tok.kind == TokenKind.IDENT:
            if prev is not None and (prev.kind in DECLARATION_KEYWORDS or prev.kind == TokenKind.COLON):
                return "type"
            if depth > 0:
                return "property"
        return None

    def classify(self, text: str) -> list[Highlight]:
        """Return highlights for *text* in source order."""
        out: list[Highlight] = []
        prev: Token | None = None
        depth = 0
        for tok in Lexer(text, Report()).tokenize():
            if tok.kind == TokenKind.EOF:
                break
            category = self._category(tok, prev, depth)
            if tok.kind == TokenKind.LBRACE:
                depth += 1
            elif tok.kind == TokenKind.RBRACE and depth > 0:
                depth -= 1
            if category is not None and category in self._theme:
                out.append(Highlight(tok.span.start, tok.span.end, category, self._theme[category]))
            if tok.kind != TokenKind.COMMENT:
                prev = tok
        return out


def build_classifier(theme: Mapping[str, object] | str | Path | None = None) -> Classifier | None:
    """Build a classifier, or return None when the theme cannot be used.

    A broken theme only disables coloring; it never fails rendering.
    """
    try:
        return Classifier(coerce_theme(theme))
    except ClassifierConfigurationError as e:
        logger.warning("syntax highlighting disabled: %s", e)
        return None
