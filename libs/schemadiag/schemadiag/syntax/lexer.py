"""Lexer (tokenizer) for schema-language source code."""

from __future__ import annotations

from schemadiag.diagnostics.report import Report
from schemadiag.diagnostics.span import Span, byte_offsets
from schemadiag.syntax.tokens import KEYWORDS, Token, TokenKind


class Lexer:
    """Tokenize schema source into a flat token stream.

    Whitespace is dropped; comments are kept as COMMENT tokens so the
    highlighter can color them.  Unknown characters are reported into the
    report and skipped.  Token spans are half-open UTF-8 byte offsets into
    *source*.
    """

    _SINGLE_CHAR: dict[str, TokenKind] = {
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "[": TokenKind.LBRACKET,
        "]": TokenKind.RBRACKET,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
        "<": TokenKind.LANGLE,
        ">": TokenKind.RANGLE,
        ":": TokenKind.COLON,
        ";": TokenKind.SEMICOLON,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
        "=": TokenKind.EQUALS,
        "@": TokenKind.AT,
        "~": TokenKind.TILDE,
    }

    def __init__(self, source: str, report: Report | None = None) -> None:
        self._source = source
        self._report = report if report is not None else Report()
        self._pos = 0
        self._offsets = byte_offsets(source)

    @property
    def report(self) -> Report:
        return self._report

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        """Return character at current position + offset, or '' at EOF."""
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _span(self, begin: int, end: int) -> Span:
        return Span(self._offsets[begin], self._offsets[end])

    def _token(self, kind: TokenKind, begin: int) -> Token:
        return Token(kind, self._source[begin : self._pos], self._span(begin, self._pos))

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _scan_comment(self, begin: int) -> Token:
        """Scan to end of line (the newline itself is NOT consumed)."""
        while not self._at_end() and self._peek() != "\n":
            self._pos += 1
        return self._token(TokenKind.COMMENT, begin)

    def _scan_string(self, begin: int) -> Token:
        """Scan a double-quoted string literal. Opening '"' already consumed."""
        while not self._at_end():
            ch = self._peek()
            if ch == '"':
                self._pos += 1
                return self._token(TokenKind.STRING_LIT, begin)
            if ch == "\\" and self._peek(1):
                self._pos += 2
                continue
            if ch == "\n":
                break
            self._pos += 1
        # Point at where the closing quote is missing
        self._report.error("unterminated string literal").annotate(
            "string starts here", self._span(begin, begin + 1)
        ).annotate('expected closing `"`', self._span(self._pos, self._pos))
        return self._token(TokenKind.STRING_LIT, begin)

    def _scan_number(self, begin: int) -> Token:
        while not self._at_end() and self._peek().isdigit():
            self._pos += 1
        return self._token(TokenKind.INT_LIT, begin)

    def _scan_identifier_or_keyword(self, begin: int) -> Token:
        while not self._at_end() and (self._peek().isalnum() or self._peek() == "_"):
            self._pos += 1
        lexeme = self._source[begin : self._pos]
        return Token(KEYWORDS.get(lexeme, TokenKind.IDENT), lexeme, self._span(begin, self._pos))

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source. Returns list ending with an EOF token."""
        tokens: list[Token] = []

        while not self._at_end():
            ch = self._peek()
            begin = self._pos

            if ch.isspace():
                self._pos += 1
                continue

            # --- Comments ---
            if ch == "#" or (ch == "/" and self._peek(1) == "/"):
                tokens.append(self._scan_comment(begin))
                continue

            # --- String literal ---
            if ch == '"':
                self._pos += 1
                tokens.append(self._scan_string(begin))
                continue

            # --- Number literal ---
            if ch.isdigit():
                tokens.append(self._scan_number(begin))
                continue

            # --- Identifier / keyword ---
            if ch.isalpha() or ch == "_":
                tokens.append(self._scan_identifier_or_keyword(begin))
                continue

            # --- Arrow ---
            if ch == "-" and self._peek(1) == ">":
                self._pos += 2
                tokens.append(self._token(TokenKind.ARROW, begin))
                continue

            # --- Single-character tokens ---
            if ch in self._SINGLE_CHAR:
                self._pos += 1
                tokens.append(self._token(self._SINGLE_CHAR[ch], begin))
                continue

            # --- Unknown character ---
            self._pos += 1
            self._report.error("unexpected character").annotate(
                f"{ch!r} is not valid here", self._span(begin, self._pos)
            )

        tokens.append(Token(TokenKind.EOF, "", self._span(self._pos, self._pos)))
        return tokens


def tokenize(source: str, report: Report | None = None) -> list[Token]:
    """Convenience wrapper: tokenize *source*, reporting problems into *report*."""
    return Lexer(source, report).tokenize()
