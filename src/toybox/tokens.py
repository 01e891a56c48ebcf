"""Convenience token shape and the discard action.

The lexer does not care what rule actions return: any object other than
None is emitted as a token. Token is provided for the common case of a
(kind, text, location) triple.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from toybox.location import Location


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by a rule action.

    Attributes:
        kind: Token category (an enum member, a string, an int...)
        text: The matched source text
        location: Where the match started, if the action asked for it

    """

    kind: Any
    text: str
    location: Location | None = None

    def __str__(self) -> str:
        if self.location is None:
            return f"({self.kind}, {self.text!r})"
        return f"({self.kind}, {self.text!r}, {self.location})"


def discard(text: str) -> None:
    """Rule action that drops its match (whitespace, comments).

    The matched span is still consumed and still moves the line and
    column counters.
    """
    return None


__all__ = ["Token", "discard"]
