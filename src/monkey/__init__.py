"""Monkey language front end: lexer and statement parser."""

from __future__ import annotations

__version__ = "0.1.0"


def check(source: str) -> list[str]:
    """Parse Monkey source and return its syntax error messages (empty when clean)."""
    from monkey.parser import parse

    _, diagnostics = parse(source)
    return [d.message for d in diagnostics]
