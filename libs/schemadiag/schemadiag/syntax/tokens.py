"""Token definitions for the schema-language lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from schemadiag.diagnostics.span import Span


class TokenKind(Enum):
    """All token types recognized by the schema lexer."""

    # === Declaration keywords ===
    SCALAR = auto()
    ENUM = auto()
    STRUCT = auto()
    TABLE = auto()

    # Constraint keywords
    INDEX = auto()
    UNIQUE = auto()
    PRIMARY_KEY = auto()
    CHECK = auto()
    DEFAULT = auto()
    REF = auto()

    # Reference actions
    ON = auto()
    DELETE = auto()
    UPDATE = auto()
    CASCADE = auto()
    RESTRICT = auto()
    SET = auto()

    # Value keywords
    NULL = auto()
    NOT = auto()
    TRUE = auto()
    FALSE = auto()

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LANGLE = auto()  # <
    RANGLE = auto()  # >
    COLON = auto()  # :
    SEMICOLON = auto()  # ;
    COMMA = auto()  # ,
    DOT = auto()  # .
    EQUALS = auto()  # =
    AT = auto()  # @
    TILDE = auto()  # ~
    ARROW = auto()  # ->

    # Literals
    INT_LIT = auto()
    STRING_LIT = auto()
    IDENT = auto()

    # Special
    COMMENT = auto()
    EOF = auto()


KEYWORDS: dict[str, TokenKind] = {
    "scalar": TokenKind.SCALAR,
    "enum": TokenKind.ENUM,
    "struct": TokenKind.STRUCT,
    "table": TokenKind.TABLE,
    "index": TokenKind.INDEX,
    "unique": TokenKind.UNIQUE,
    "primary_key": TokenKind.PRIMARY_KEY,
    "check": TokenKind.CHECK,
    "default": TokenKind.DEFAULT,
    "ref": TokenKind.REF,
    "on": TokenKind.ON,
    "delete": TokenKind.DELETE,
    "update": TokenKind.UPDATE,
    "cascade": TokenKind.CASCADE,
    "restrict": TokenKind.RESTRICT,
    "set": TokenKind.SET,
    "null": TokenKind.NULL,
    "not": TokenKind.NOT,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}

# Keywords that introduce a named item; the identifier after them is a type name.
DECLARATION_KEYWORDS = frozenset({TokenKind.SCALAR, TokenKind.ENUM, TokenKind.STRUCT, TokenKind.TABLE})

BRACKETS = frozenset(
    {
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LANGLE,
        TokenKind.RANGLE,
    }
)

_KEYWORD_KINDS = frozenset(KEYWORDS.values())


@dataclass(frozen=True)
class Token:
    """A single token produced by the schema lexer."""

    kind: TokenKind
    lexeme: str
    span: Span

    @property
    def is_keyword(self) -> bool:
        return self.kind in _KEYWORD_KINDS

    @property
    def is_bracket(self) -> bool:
        return self.kind in BRACKETS
