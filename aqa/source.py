"""
Source text positions and the character cursor shared by every stage.

Author: xwest
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Position:
    """
    A 1-based line/column location in the source text.

    Always refers to the first character of a lexeme or token.
    """
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"

    def __repr__(self) -> str:
        return f"Position({self.line}, {self.column})"


class SourceCursor:
    """
    Forward-only cursor over source characters.

    `advance` is the only way to move; it updates line and column together.
    """

    def __init__(self, source: str):
        self.source = source
        self.offset = 0
        self.line = 1
        self.column = 1

    @property
    def position(self) -> Position:
        """Position of the next unconsumed character."""
        return Position(self.line, self.column)

    def at_end(self) -> bool:
        return self.offset >= len(self.source)

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it, or None at the end."""
        if self.at_end():
            return None
        return self.source[self.offset]

    def advance(self) -> Optional[str]:
        """Consume and return the next character, or None at the end."""
        if self.at_end():
            return None

        char = self.source[self.offset]
        self.offset += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def match(self, expected: str) -> bool:
        """Consume the next character only if it equals `expected`."""
        if self.peek() == expected:
            self.advance()
            return True
        return False
