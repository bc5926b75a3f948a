"""Monkey lexer: converts source text into a pull-based token stream."""

from __future__ import annotations

from collections.abc import Iterator

from monkey.tokens import (
    Position,
    Token,
    TokenType,
    is_digit,
    is_letter,
    is_whitespace,
    lookup_ident,
)

# Sentinel for "no character": set once the read position passes the end.
EOF_CHAR = ""

_SINGLE_CHAR = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# First character -> (single-char type, two-char type) for "=" / "==" and "!" / "!=".
_TWO_CHAR = {
    "=": (TokenType.ASSIGN, TokenType.EQ),
    "!": (TokenType.BANG, TokenType.NOT_EQ),
}


class Lexer:
    """Scan Monkey source one character at a time, producing a token per call."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._read_position = 0
        self._ch = EOF_CHAR
        self._line = 1
        self._line_start = 0
        self._read_char()

    @property
    def source(self) -> str:
        return self._source

    def next_token(self) -> Token:
        """Return the next token. Once EOF is reached it is returned on every call."""
        self._skip_whitespace()
        start = self._current_pos()
        ch = self._ch

        if ch in _TWO_CHAR:
            single, double = _TWO_CHAR[ch]
            if self._peek_char() == "=":
                self._read_char()
                tok = Token(double, ch + self._ch, start)
            else:
                tok = Token(single, ch, start)
        elif ch in _SINGLE_CHAR:
            tok = Token(_SINGLE_CHAR[ch], ch, start)
        elif ch == EOF_CHAR:
            tok = Token(TokenType.EOF, "", start)
        elif is_letter(ch):
            # The run readers leave the cursor on the next unread character.
            literal = self._read_identifier()
            return Token(lookup_ident(literal), literal, start)
        elif is_digit(ch):
            return Token(TokenType.INT, self._read_number(), start)
        else:
            tok = Token(TokenType.ILLEGAL, ch, start)

        self._read_char()
        return tok

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        offset = min(self._position, len(self._source))
        return Position(self._line, offset - self._line_start + 1, offset)

    def _read_char(self) -> None:
        if self._ch == "\n":
            self._line += 1
            self._line_start = self._read_position

        if self._read_position >= len(self._source):
            self._ch = EOF_CHAR
        else:
            self._ch = self._source[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        if self._read_position >= len(self._source):
            return EOF_CHAR
        return self._source[self._read_position]

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._ch):
            self._read_char()

    def _read_identifier(self) -> str:
        start = self._position
        while is_letter(self._ch):
            self._read_char()
        return self._source[start : self._position]

    def _read_number(self) -> str:
        start = self._position
        while is_digit(self._ch):
            self._read_char()
        return self._source[start : self._position]


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return the list, EOF included."""
    return list(Lexer(source))
