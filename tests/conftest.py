"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from monkey.ast import LetStatement, Program
from monkey.lexer import Lexer, tokenize
from monkey.parser import Parser
from monkey.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns (Program, Parser)."""

    def _parse(source: str) -> tuple[Program, Parser]:
        parser = Parser(Lexer(source))
        program = parser.parse_program()
        return program, parser

    return _parse


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_literals(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token literals match the expected list."""
    actual = [t.literal for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_no_errors(parser: Parser) -> None:
    """Fail with every recorded message if the parser reported errors."""
    errors = parser.errors
    assert not errors, f"parser has {len(errors)} errors:\n" + "\n".join(errors)


def assert_let(stmt, name: str) -> None:
    """Assert that stmt is a let statement binding *name*."""
    assert isinstance(stmt, LetStatement), f"Expected LetStatement, got {type(stmt).__name__}"
    assert stmt.token_literal() == "let"
    assert stmt.name.value == name, f"Expected name '{name}', got '{stmt.name.value}'"
    assert stmt.name.token_literal() == name
