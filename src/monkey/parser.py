"""Monkey parser: converts a token stream into a Program AST plus diagnostics."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from monkey.ast import Identifier, LetStatement, Program, ReturnStatement, Statement
from monkey.errors import Diagnostic
from monkey.lexer import Lexer
from monkey.tokens import Token, TokenType


class TokenWindow:
    """Fixed-size lookahead queue holding the current and peek tokens."""

    SIZE = 2

    def __init__(self, pull: Callable[[], Token]) -> None:
        self._pull = pull
        self._slots: deque[Token] = deque(maxlen=self.SIZE)

    @property
    def primed(self) -> bool:
        return len(self._slots) == self.SIZE

    def prime(self) -> None:
        """Fill both slots from the token source."""
        self._slots.clear()
        while len(self._slots) < self.SIZE:
            self._slots.append(self._pull())

    def advance(self) -> Token:
        """Shift peek into current, pull a new peek, and return the new current."""
        self._require_primed()
        self._slots.append(self._pull())  # maxlen evicts the old current
        return self._slots[0]

    @property
    def current(self) -> Token:
        self._require_primed()
        return self._slots[0]

    @property
    def peek(self) -> Token:
        self._require_primed()
        return self._slots[1]

    def _require_primed(self) -> None:
        if not self.primed:
            raise RuntimeError("token window has not been primed")


class Parser:
    """Recursive descent parser over a Lexer's token stream.

    Syntax errors never raise: each one is recorded as a Diagnostic and the
    offending statement is dropped, so a single pass reports every problem.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._diagnostics: list[Diagnostic] = []
        self._window = TokenWindow(lexer.next_token)
        self._window.prime()

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    @property
    def errors(self) -> list[str]:
        """Diagnostic messages in detection order."""
        return [d.message for d in self._diagnostics]

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def _cur(self) -> Token:
        return self._window.current

    def _next_token(self) -> None:
        self._window.advance()

    def _cur_token_is(self, tt: TokenType) -> bool:
        return self._window.current.type == tt

    def _peek_token_is(self, tt: TokenType) -> bool:
        return self._window.peek.type == tt

    def expect_peek(self, tt: TokenType) -> bool:
        """Advance if the peek token has type *tt*; otherwise record an error."""
        if self._peek_token_is(tt):
            self._next_token()
            return True
        self._peek_error(tt)
        return False

    def _peek_error(self, expected: TokenType) -> None:
        tok = self._window.peek
        message = (
            f"expected next token to be '{expected.label}', "
            f"got '{tok.type.label}' instead"
        )
        self._diagnostics.append(
            Diagnostic(message, tok.position, self._lexer.source, max(1, len(tok.literal)))
        )

    def _skip_to_semicolon(self) -> None:
        # Stops at EOF too, so an unterminated statement cannot loop forever
        while not self._cur_token_is(TokenType.SEMICOLON) and not self._cur_token_is(
            TokenType.EOF
        ):
            self._next_token()

    # ------------------------------------------------------------------
    # Program level
    # ------------------------------------------------------------------

    def parse_program(self) -> Program:
        statements: list[Statement] = []

        while not self._cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self._next_token()

        return Program(tuple(statements))

    def parse_statement(self) -> Statement | None:
        match self._cur.type:
            case TokenType.LET:
                return self._parse_let_statement()
            case TokenType.RETURN:
                return self._parse_return_statement()
            case _:
                # Expression statements are not parsed yet
                return None

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_let_statement(self) -> LetStatement | None:
        if not self.expect_peek(TokenType.IDENT):
            return None

        name_tok = self._cur
        name = Identifier(name_tok, name_tok.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        # TODO: parse the bound expression once precedence parsing exists;
        # until then the value is a copy of the bound name.
        self._skip_to_semicolon()
        value_tok = Token(TokenType.IDENT, name_tok.literal, name_tok.position)
        return LetStatement(name, Identifier(value_tok, name_tok.literal))

    def _parse_return_statement(self) -> ReturnStatement:
        return_tok = self._cur
        self._next_token()  # consume 'return'

        self._skip_to_semicolon()
        value = Identifier(Token(TokenType.STRING, "", return_tok.position), "")
        return ReturnStatement(value)


def parse(source: str) -> tuple[Program, list[Diagnostic]]:
    """Convenience function: parse source text into a Program and its diagnostics."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.diagnostics
