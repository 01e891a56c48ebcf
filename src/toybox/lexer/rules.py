"""Lexer rules and the ordered rule table.

A rule pairs a compiled pattern with the lexical states it is active in
and an action turning the matched text into a token. Actions come in two
shapes, chosen when the rule is registered:

- ActionKind.TEXT: action(text)
- ActionKind.TEXT_AND_LOCATION: action(text, location)

An action returns the token to emit, or None to discard the match.

Declaration order matters: strategies break ties (FIRST, LONGEST) or pick
winners (LAST) by position in the table.

"""

from __future__ import annotations

import inspect
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from toybox.errors import ConfigurationError
from toybox.lexer.states import WILDCARD

if TYPE_CHECKING:
    from toybox.location import Location

Action = Callable[..., Any]


class ActionKind(Enum):
    """Which arguments a rule action receives."""

    TEXT = auto()  # action(text)
    TEXT_AND_LOCATION = auto()  # action(text, location)

    @property
    def arity(self) -> int:
        return 2 if self is ActionKind.TEXT_AND_LOCATION else 1


@dataclass(frozen=True, slots=True)
class Rule:
    """A single scanning rule.

    Attributes:
        pattern: Compiled regular expression
        states: Lexical states the rule is active in (may hold WILDCARD)
        action: Callback producing a token or None
        kind: Shape of the action's argument list

    """

    pattern: re.Pattern[str]
    states: frozenset[str]
    action: Action
    kind: ActionKind = ActionKind.TEXT

    @classmethod
    def create(
        cls,
        pattern: str | re.Pattern[str],
        action: Action,
        states: str | Iterable[str] | None = None,
        with_location: bool = False,
        flags: int = 0,
    ) -> Rule:
        """Validate the arguments and build a rule.

        Args:
            pattern: Regular expression source or compiled pattern
            action: Token-producing callback
            states: One state name, several, or None for WILDCARD only
            with_location: Pass the match Location as a second argument
            flags: `re` flags for string patterns

        Raises:
            ConfigurationError: If the pattern does not compile or matches
                the empty string, or the action cannot take the arguments
                its kind implies
        """
        compiled = _compile(pattern, flags)
        kind = ActionKind.TEXT_AND_LOCATION if with_location else ActionKind.TEXT
        _check_action(action, kind)
        return cls(
            pattern=compiled,
            states=_normalize_states(states),
            action=action,
            kind=kind,
        )

    @property
    def wants_location(self) -> bool:
        return self.kind is ActionKind.TEXT_AND_LOCATION

    def active_in(self, state: str) -> bool:
        """Whether the rule is eligible while `state` is current."""
        return state == WILDCARD or WILDCARD in self.states or state in self.states

    def apply(self, text: str, location: Location) -> Any:
        """Run the action on matched text."""
        if self.kind is ActionKind.TEXT_AND_LOCATION:
            return self.action(text, location)
        return self.action(text)


class RuleTable:
    """Ordered, append-only collection of rules."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: list[Rule] = list(rules)

    def add(self, rule: Rule) -> None:
        self._rules.append(rule)

    @property
    def states(self) -> frozenset[str]:
        """Every state name mentioned by some rule."""
        names: set[str] = set()
        for rule in self._rules:
            names.update(rule.states)
        return frozenset(names)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index: int) -> Rule:
        return self._rules[index]

    def __repr__(self) -> str:
        return f"RuleTable({len(self._rules)} rules)"


def _compile(pattern: str | re.Pattern[str], flags: int) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    else:
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            msg = f"Invalid pattern {pattern!r}: {e}"
            raise ConfigurationError(msg) from e

    # An empty match would never advance the scan position
    if compiled.match("") is not None:
        msg = f"Pattern {compiled.pattern!r} matches the empty string"
        raise ConfigurationError(msg)
    return compiled


def _check_action(action: Action, kind: ActionKind) -> None:
    if not callable(action):
        msg = f"Rule action {action!r} is not callable"
        raise ConfigurationError(msg)

    try:
        signature = inspect.signature(action)
    except (TypeError, ValueError):
        # Some builtins expose no signature; they are checked when called
        return

    try:
        signature.bind(*([None] * kind.arity))
    except TypeError:
        name = getattr(action, "__qualname__", repr(action))
        expected = "(text, location)" if kind.arity == 2 else "(text)"
        msg = f"Wrong number of parameters for {name}: expected {expected}"
        raise ConfigurationError(msg) from None


def _normalize_states(states: str | Iterable[str] | None) -> frozenset[str]:
    if states is None:
        return frozenset({WILDCARD})
    if isinstance(states, str):
        return frozenset({states})
    names = frozenset(states)
    if not names:
        msg = "A rule must be active in at least one state"
        raise ConfigurationError(msg)
    return names


__all__ = ["Action", "ActionKind", "Rule", "RuleTable"]
