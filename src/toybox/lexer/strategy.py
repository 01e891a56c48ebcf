"""Match strategies: which rule wins when several match at one position.

Every strategy only considers rules that are eligible in the current
lexical state and whose pattern matches starting exactly at the scan
position. Zero-width matches are never candidates.

- FIRST: the first matching rule in declaration order. Later rules are
  not tried at all.
- LONGEST: the rule with the longest match. Ties go to the rule
  declared first.
- LAST: every matching rule replaces the previous candidate, so the last
  matching rule in declaration order wins whatever the match lengths.
  This is how the "longest" strategy of older table-driven toy lexers
  actually behaved; it is kept under its honest name.

"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING

from toybox.errors import ConfigurationError

if TYPE_CHECKING:
    from toybox.lexer.rules import Rule


class MatchStrategy(Enum):
    """Policy selecting the winning rule among candidates."""

    FIRST = "first"
    LONGEST = "longest"
    LAST = "last"

    @classmethod
    def parse(cls, name: str) -> MatchStrategy:
        """Look up a strategy by member name or value, case-insensitively.

        Raises:
            ConfigurationError: If no strategy has that name
        """
        if not isinstance(name, str):
            msg = f"Match strategy must be a MatchStrategy or its name, got {name!r}"
            raise ConfigurationError(msg)
        try:
            return cls(name.lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            msg = f"Unknown match strategy {name!r} (expected one of: {choices})"
            raise ConfigurationError(msg) from None


def select_match(
    rules: Iterable[Rule],
    text: str,
    pos: int,
    state: str,
    strategy: MatchStrategy,
) -> tuple[Rule, re.Match[str]] | None:
    """Pick the winning (rule, match) pair at `pos`, or None.

    Args:
        rules: Rules in declaration order
        text: The whole input
        pos: Offset every candidate match must start at
        state: Current lexical state
        strategy: Selection policy

    Returns:
        The selected rule and its match object, or None when no eligible
        rule matches at `pos`.
    """
    selected: tuple[Rule, re.Match[str]] | None = None
    longest = 0

    for rule in rules:
        if not rule.active_in(state):
            continue
        match = rule.pattern.match(text, pos)
        if match is None:
            continue
        length = match.end() - pos
        if length == 0:
            continue

        if strategy is MatchStrategy.FIRST:
            return rule, match
        if strategy is MatchStrategy.LONGEST:
            if length > longest:
                selected = (rule, match)
                longest = length
        else:
            selected = (rule, match)

    return selected


__all__ = ["MatchStrategy", "select_match"]
