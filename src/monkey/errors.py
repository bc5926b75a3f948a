"""Parser diagnostics with formatted source context."""

from __future__ import annotations

from dataclasses import dataclass

from monkey.tokens import Position


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A recorded syntax error: message, where it happened, and the source it refers to."""

    message: str
    position: Position | None
    source: str
    length: int = 1

    def __str__(self) -> str:
        return self.message

    def format(self, filename: str = "input.mk") -> str:
        if self.position is None:
            return f"error: {self.message}\n  --> {filename}"

        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the offending token, at least one caret, clipped to the line
        underline_len = max(1, min(self.length, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
