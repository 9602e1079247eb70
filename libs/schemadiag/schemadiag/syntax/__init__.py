"""Schema-language tokens and lexer (depends on diagnostics)."""

from schemadiag.syntax.lexer import Lexer, tokenize
from schemadiag.syntax.tokens import BRACKETS, DECLARATION_KEYWORDS, KEYWORDS, Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "KEYWORDS",
    "BRACKETS",
    "DECLARATION_KEYWORDS",
    "Lexer",
    "tokenize",
]
