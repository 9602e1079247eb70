"""Declaration checks run over the token stream.

These passes exist to produce real diagnostics for the renderer; they look
only at top-level declarations and table bodies, not at full schema syntax.
"""

from __future__ import annotations

from dataclasses import dataclass

from schemadiag.diagnostics.report import Report
from schemadiag.diagnostics.span import Span
from schemadiag.syntax.lexer import Lexer
from schemadiag.syntax.tokens import DECLARATION_KEYWORDS, Token, TokenKind


@dataclass(frozen=True)
class Declaration:
    """A top-level ``<keyword> <name>`` item."""

    kind: str
    name: str
    name_span: Span
    body: tuple[Token, ...] = ()


def _significant(tokens: list[Token]) -> list[Token]:
    return [t for t in tokens if t.kind not in (TokenKind.COMMENT, TokenKind.EOF)]


def declarations(tokens: list[Token]) -> list[Declaration]:
    """Collect top-level declarations with the tokens of their ``{ }`` body."""
    toks = _significant(tokens)
    out: list[Declaration] = []
    depth = 0
    i = 0
    while i < len(toks):
        tok = toks[i]
        if tok.kind == TokenKind.LBRACE:
            depth += 1
        elif tok.kind == TokenKind.RBRACE:
            depth = max(depth - 1, 0)
        elif (
            depth == 0
            and tok.kind in DECLARATION_KEYWORDS
            and i + 1 < len(toks)
            and toks[i + 1].kind == TokenKind.IDENT
        ):
            name = toks[i + 1]
            body: list[Token] = []
            j = i + 2
            if j < len(toks) and toks[j].kind == TokenKind.LBRACE:
                nested = 0
                while j < len(toks):
                    body.append(toks[j])
                    if toks[j].kind == TokenKind.LBRACE:
                        nested += 1
                    elif toks[j].kind == TokenKind.RBRACE:
                        nested -= 1
                        if nested == 0:
                            break
                    j += 1
            out.append(Declaration(tok.lexeme, name.lexeme, name.span, tuple(body)))
            i = j + 1 if body else i + 2
            continue
        i += 1
    return out


def check_duplicates(decls: list[Declaration], report: Report) -> None:
    """Report every redefinition of an already declared name."""
    seen: dict[str, Declaration] = {}
    for decl in decls:
        first = seen.get(decl.name)
        if first is None:
            seen[decl.name] = decl
            continue
        report.error(f"duplicate {decl.kind}").annotate(
            "first definition here", first.name_span
        ).annotate("redefined here", decl.name_span)


def check_empty_tables(decls: list[Declaration], report: Report) -> None:
    """Warn about tables declared with an empty body."""
    for decl in decls:
        if decl.kind != "table" or len(decl.body) != 2:
            continue
        lbrace, rbrace = decl.body
        report.warning("empty table").annotate(
            f"table {decl.name} has no columns", Span(lbrace.span.start, rbrace.span.end)
        )


def check_schema(source: str, report: Report | None = None) -> Report:
    """Lex *source* and run all declaration checks, accumulating into *report*."""
    if report is None:
        report = Report()
    tokens = Lexer(source, report).tokenize()
    decls = declarations(tokens)
    check_duplicates(decls, report)
    check_empty_tables(decls, report)
    return report
