"""Forward-only cursor over the lines of a text document."""

import re
from collections.abc import Sequence

LINE_BREAK = re.compile(r"\r?\n")


class LineScanner:
    """Explicit line cursor shared by the phases of a line-oriented parser."""

    def __init__(self, lines: Sequence[str]):
        self.lines = lines
        self.position = 0

    @classmethod
    def from_text(cls, text: str) -> "LineScanner":
        """Split on LF or CRLF line endings."""
        return cls(LINE_BREAK.split(text))

    def at_end(self) -> bool:
        return self.position >= len(self.lines)

    def peek(self) -> str | None:
        """Current line without consuming it, or None at end of input."""
        if self.at_end():
            return None
        return self.lines[self.position]

    def advance(self) -> str:
        """Consume and return the current line."""
        if self.at_end():
            raise IndexError("advance() past end of input")
        line = self.lines[self.position]
        self.position += 1
        return line
