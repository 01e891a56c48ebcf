"""Exception classes for Toybox.

Every failure the lexer or parser can report is one of the classes below,
all rooted at ToyboxError. None of them is retried or recovered from
inside the library: each one ends the current scan or parse session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toybox.location import Location


class ToyboxError(Exception):
    """Base exception for all Toybox errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigurationError(ToyboxError):
    """Invalid lexer or parser setup.

    Raised at registration/construction time, never deferred to scanning:
    a rule action with the wrong arity, a pattern that does not compile or
    matches the empty string, a negative lookahead depth, or scanning
    before any input was supplied.
    """

    pass


class StateMismatchError(ToyboxError):
    """Unbalanced lexical state exit.

    Raised when exit(state) is called while the top of the state stack is
    a different state, or when it would pop the last remaining state.
    """

    def __init__(self, expected: str, actual: str | None) -> None:
        """Initialize state mismatch error.
        
        Args:
            expected: The state the caller tried to exit
            actual: The state actually on top of the stack (None when the
                stack holds a single state that cannot be popped)
        """
        self.expected = expected
        self.actual = actual

        if actual is None:
            message = f"Cannot exit state '{expected}': it is the only state on the stack"
        else:
            message = f"Cannot exit state '{expected}': current state is '{actual}'"
        super().__init__(message)


class NoMatchError(ToyboxError):
    """No eligible rule matches at the current scan position."""

    def __init__(self, location: Location, state: str, preview: str = "") -> None:
        """Initialize no-match error.
        
        Args:
            location: Position where scanning got stuck
            state: Lexical state that was current
            preview: A few characters of input starting at the position
        """
        self.location = location
        self.state = state
        self.preview = preview

        message = f"No match at {location}"
        if preview:
            message += f" (next input {preview!r})"
        message += f" in state '{state}'"
        super().__init__(message)

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column


class LookaheadExceededError(ToyboxError):
    """A parser peeked further ahead than its configured depth.

    This is a contract violation of the grammar code, not a parse error.
    """

    def __init__(self, requested: int, lookahead: int) -> None:
        self.requested = requested
        self.lookahead = lookahead
        super().__init__(
            f"Trying to read past specified lookahead: peek({requested}) "
            f"with lookahead {lookahead}"
        )


class LookaheadBufferError(ToyboxError):
    """Lookahead buffer discipline violation (a caller bug)."""

    pass


class BufferFullError(LookaheadBufferError):
    """put() on a buffer that already holds capacity elements."""

    pass


class BufferEmptyError(LookaheadBufferError, LookupError):
    """take() on an empty buffer, or get() outside [0, size)."""

    pass


class ParserError(ToyboxError):
    """Grammar or semantic failure reported by parser code.
    
    Raised through Parser.fail() and Parser.assert_that().
    """

    def __init__(self, message: str, location: Location) -> None:
        """Initialize parser error.
        
        Args:
            message: Error description
            location: Where the failure was detected
        """
        self.message = message
        self.location = location
        super().__init__(f"{message} at {location}")

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column


__all__ = [
    "BufferEmptyError",
    "BufferFullError",
    "ConfigurationError",
    "LookaheadBufferError",
    "LookaheadExceededError",
    "NoMatchError",
    "ParserError",
    "StateMismatchError",
    "ToyboxError",
]
