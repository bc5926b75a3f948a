"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    # Special
    ILLEGAL = "ILLEGAL"  # unrecognized character
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"  # [A-Za-z_]+
    INT = "INT"  # [0-9]+
    STRING = "STRING"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    @property
    def label(self) -> str:
        """Display name used in diagnostics."""
        return self.name


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: its category and the source text that produced it."""

    type: TokenType
    literal: str
    position: Position | None = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r})"


KEYWORDS = MappingProxyType(
    {
        "fn": TokenType.FUNCTION,
        "let": TokenType.LET,
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "if": TokenType.IF,
        "else": TokenType.ELSE,
        "return": TokenType.RETURN,
    }
)


def lookup_ident(literal: str) -> TokenType:
    """Return the keyword type for *literal*, or IDENT if it is not reserved."""
    return KEYWORDS.get(literal, TokenType.IDENT)


def is_letter(ch: str) -> bool:
    """Return True if ch can start or continue an identifier."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_whitespace(ch: str) -> bool:
    return ch in (" ", "\t", "\n", "\r")
