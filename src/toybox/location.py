"""Source location tracking for tokens and error messages.

Provides the Location dataclass: a 1-indexed (line, column) pair in the
input text. The lexer creates a fresh Location every time the current
position is requested.

Thread Safety:
Location is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """A (line, column) position in an input string.

    Both coordinates are 1-indexed. Two locations with the same
    coordinates compare equal and hash alike.

    Attributes:
        line: Line number (>= 1)
        column: Column number (>= 1)

    Examples:
            >>> loc = Location(3, 14)
            >>> str(loc)
            'line 3, column 14'
            >>> loc == Location(line=3, column=14)
            True

    """

    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"
