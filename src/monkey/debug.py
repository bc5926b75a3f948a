"""--debug AST dump and --tokens listing."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from monkey.ast import (
    BooleanLiteral,
    Expression,
    ExpressionStatement,
    Identifier,
    IntegerLiteral,
    LetStatement,
    Program,
    ReturnStatement,
    Statement,
    StringLiteral,
)
from monkey.tokens import Token


def dump_ast(program: Program, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable AST tree to *file*."""
    file.write("Program\n")
    for stmt in program.statements:
        _dump_statement(stmt, 1, file)


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stdout) -> None:
    """Print one token per line as LINE:COL TYPE 'literal'."""
    for tok in tokens:
        where = f"{tok.position.line}:{tok.position.column}" if tok.position else "-"
        file.write(f"{where:<8} {tok.type.name:<10} {tok.literal!r}\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_statement(stmt: Statement, depth: int, f: TextIO) -> None:
    match stmt:
        case LetStatement(name=name, value=value):
            f.write(f"{_indent(depth)}LetStatement\n")
            f.write(f"{_indent(depth + 1)}name {_format_expression(name)}\n")
            f.write(f"{_indent(depth + 1)}value {_format_expression(value)}\n")
        case ReturnStatement(value=value):
            f.write(f"{_indent(depth)}ReturnStatement\n")
            f.write(f"{_indent(depth + 1)}value {_format_expression(value)}\n")
        case ExpressionStatement(expression=expression):
            f.write(f"{_indent(depth)}ExpressionStatement\n")
            f.write(f"{_indent(depth + 1)}{_format_expression(expression)}\n")
        case _:
            raise TypeError(f"cannot dump statement of type {type(stmt).__name__}")


def _format_expression(expr: Expression) -> str:
    match expr:
        case Identifier(value=value):
            return f"Identifier({value!r})"
        case IntegerLiteral(value=value):
            return f"Integer({value})"
        case StringLiteral(value=value):
            return f"String({value!r})"
        case BooleanLiteral():
            return f"Boolean({expr})"
        case _:
            raise TypeError(f"cannot dump expression of type {type(expr).__name__}")
