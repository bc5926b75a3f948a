"""Tests for AST node rendering and token literals."""

from __future__ import annotations

from monkey.ast import (
    BooleanLiteral,
    ExpressionStatement,
    Identifier,
    IntegerLiteral,
    LetStatement,
    Program,
    ReturnStatement,
    StringLiteral,
)
from monkey.tokens import Token, TokenType


def ident(name: str) -> Identifier:
    return Identifier(Token(TokenType.IDENT, name), name)


class TestRendering:
    def test_let_statement(self):
        program = Program((LetStatement(ident("my_var"), ident("another_var")),))
        assert str(program) == "let my_var = another_var;"

    def test_return_with_value(self):
        stmt = ReturnStatement(IntegerLiteral(Token(TokenType.INT, "5"), 5))
        assert str(stmt) == "return 5;"

    def test_return_with_empty_value(self):
        stmt = ReturnStatement(Identifier(Token(TokenType.STRING, ""), ""))
        assert str(stmt) == "return;"

    def test_literals(self):
        assert str(StringLiteral(Token(TokenType.STRING, "hi"), "hi")) == "hi"
        assert str(BooleanLiteral(Token(TokenType.TRUE, "true"), True)) == "true"
        assert str(BooleanLiteral(Token(TokenType.FALSE, "false"), False)) == "false"

    def test_program_joins_lines(self):
        program = Program(
            (
                LetStatement(ident("x"), ident("x")),
                ExpressionStatement(ident("y")),
            )
        )
        assert str(program) == "let x = x;\ny"


class TestTokenLiteral:
    def test_statements(self):
        assert LetStatement(ident("a"), ident("a")).token_literal() == "let"
        assert ReturnStatement(ident("a")).token_literal() == "return"
        assert ExpressionStatement(ident("a")).token_literal() == "a"

    def test_program(self):
        assert Program().token_literal() == ""
        assert Program((ReturnStatement(ident("a")),)).token_literal() == "return"

    def test_identifier(self):
        assert ident("foo").token_literal() == "foo"


class TestParsedRendering:
    def test_round_trip_shape(self, parse_source):
        program, _ = parse_source("let x = 5;\nreturn 10;")
        # Values are placeholders: the let repeats its name, the return is bare
        assert str(program) == "let x = x;\nreturn;"
