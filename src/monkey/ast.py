"""AST node types for parsed Monkey programs.

``str(node)`` renders a node back to canonical source text.
"""

from __future__ import annotations

from dataclasses import dataclass

from monkey.tokens import Token


@dataclass(frozen=True, slots=True)
class Identifier:
    """A reference to a name."""

    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    token: Token
    value: int

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class StringLiteral:
    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    token: Token
    value: bool

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return "true" if self.value else "false"


Expression = Identifier | IntegerLiteral | StringLiteral | BooleanLiteral


@dataclass(frozen=True, slots=True)
class LetStatement:
    """Binding statement: let <name> = <value>;"""

    name: Identifier
    value: Expression

    def token_literal(self) -> str:
        return "let"

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"


@dataclass(frozen=True, slots=True)
class ReturnStatement:
    """return <value>; an empty value renders as a bare ``return;``."""

    value: Expression

    def token_literal(self) -> str:
        return "return"

    def __str__(self) -> str:
        value = str(self.value)
        if value == "":
            return "return;"
        return f"return {value};"


@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    expression: Expression

    def token_literal(self) -> str:
        return str(self.expression)

    def __str__(self) -> str:
        return str(self.expression)


Statement = LetStatement | ReturnStatement | ExpressionStatement


@dataclass(frozen=True, slots=True)
class Program:
    """Root node: statements in source order."""

    statements: tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "\n".join(str(stmt) for stmt in self.statements)
