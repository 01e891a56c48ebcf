"""Lexical state stack.

Lexical states restrict which rules are eligible at a given moment. They
nest (a string literal inside an interpolation inside a string...), so the
lexer keeps them on a stack whose top is the current state.

Two names are predefined:
- INITIAL: the default bottom-of-stack state of a fresh lexer
- WILDCARD: matches in both directions. A rule tagged WILDCARD is
  eligible in every state, and while WILDCARD is the current state every
  rule is eligible.

Thread Safety:
StateStack instances belong to a single Lexer. Not safe to share.

"""

from __future__ import annotations

from collections.abc import Iterator

from toybox.errors import StateMismatchError

WILDCARD = "*"
INITIAL = "INITIAL"


class StateStack:
    """Non-empty stack of lexical state names.

    Usage:
        >>> stack = StateStack()
        >>> stack.push("COMMENT")
        >>> stack.current
        'COMMENT'
        >>> stack.pop("COMMENT")
        >>> stack.current
        'INITIAL'

    """

    __slots__ = ("_states",)

    def __init__(self, initial: str = INITIAL) -> None:
        self._states: list[str] = [initial]

    @property
    def current(self) -> str:
        """The state on top of the stack."""
        return self._states[-1]

    @property
    def depth(self) -> int:
        return len(self._states)

    def push(self, state: str) -> None:
        self._states.append(state)

    def pop(self, state: str) -> None:
        """Pop the top state, which must be `state`.

        Raises:
            StateMismatchError: If the top is another state, or if `state`
                is the only state left (the stack never becomes empty).
        """
        current = self._states[-1]
        if current != state:
            raise StateMismatchError(state, current)
        if len(self._states) == 1:
            raise StateMismatchError(state, None)
        self._states.pop()

    def reset(self, initial: str) -> None:
        """Drop every state and start over from `initial`."""
        self._states = [initial]

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._states)

    def __repr__(self) -> str:
        return f"StateStack({self._states!r})"


__all__ = ["INITIAL", "WILDCARD", "StateStack"]
