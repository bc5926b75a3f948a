"""Interactive read-parse-print loop."""

from __future__ import annotations

import sys
from typing import TextIO

from monkey.debug import dump_tokens
from monkey.lexer import tokenize
from monkey.parser import parse

PROMPT = ">> "


def start(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    *,
    tokens: bool = False,
) -> None:
    """Read lines until end of input, echoing each line's parsed program or its errors."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return

        if tokens:
            dump_tokens(tokenize(line), file=stdout)

        program, diagnostics = parse(line)
        if diagnostics:
            for diag in diagnostics:
                stdout.write(diag.format("<stdin>") + "\n")
            continue

        if program.statements:
            stdout.write(f"{program}\n")
