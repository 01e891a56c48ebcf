"""Rule-table driven lexer.

The lexer owns one input string and a scan cursor. Each call to next()
tries the registered rules at the cursor, lets the match strategy pick a
winner, advances past the matched text and hands it to the winning rule's
action. Actions returning None are discarded and scanning continues, so
whitespace and comments never reach the caller.

Thread Safety:
Lexer instances are not thread-safe. One lexer serves one scan session at
a time; input() resets the whole session.

"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import IO, Any

from toybox.errors import ConfigurationError, NoMatchError
from toybox.lexer.rules import Action, Rule, RuleTable
from toybox.lexer.states import StateStack
from toybox.lexer.strategy import MatchStrategy, select_match
from toybox.location import Location
from toybox.profiling import get_scan_accumulator
from toybox.source import read_source
from toybox.tokens import Token, discard
from toybox.utils.logger import get_logger

logger = get_logger(__name__)

# Characters of upcoming input quoted in NoMatchError messages
_PREVIEW_LENGTH = 10


@dataclass(slots=True)
class ScanState:
    """Mutable cursor of one scan session.

    Attributes:
        pos: Offset of the next unread character
        line: Line of `pos` (1-indexed)
        column: Column of `pos` (1-indexed)

    """

    pos: int = 0
    line: int = 1
    column: int = 1

    def location(self) -> Location:
        return Location(self.line, self.column)

    def consume(self, text: str) -> None:
        """Move past `text`, updating line and column in one step.

        Multi-line spans (block comments, long strings) are handled in a
        single update: line grows by the number of newlines and column is
        measured from the last of them.
        """
        length = len(text)
        last = text.rfind("\n")
        if last >= 0:
            self.column = length - last
            self.line += text.count("\n")
        else:
            self.column += length
        self.pos += length


class Lexer:
    """Lexer driven by an ordered table of regular-expression rules.

    Usage:
        lexer = Lexer()
        lexer.add_token(r"[A-Za-z]+", "IDENT")
        lexer.add_discard(r"\\s+")

        @lexer.token(r"[0-9]+")
        def number(text):
            return int(text)

        lexer.input("foo 42")
        lexer.next()  # Token(kind='IDENT', text='foo', location=...)
        lexer.next()  # 42
        lexer.next()  # None: end of input

    """

    __slots__ = (
        "_rules",
        "_text",
        "_text_len",
        "_scan",
        "_states",
        "_strategy",
        "_initial_state",
        "_regex_flags",
    )

    def __init__(
        self,
        rules: Iterable[Rule] = (),
        *,
        match_strategy: MatchStrategy | str | None = None,
        initial_state: str | None = None,
        regex_flags: int | None = None,
    ) -> None:
        """Initialize a lexer with no input.

        Unspecified settings come from the active ScanConfig.

        Args:
            rules: Pre-built rules, in declaration order
            match_strategy: Rule selection policy
            initial_state: State at the bottom of the state stack
            regex_flags: `re` flags for string patterns given to add_rule
        """
        from toybox.config import get_scan_config

        config = get_scan_config()
        if match_strategy is None:
            match_strategy = config.match_strategy
        self._strategy = _as_strategy(match_strategy)
        self._initial_state = config.initial_state if initial_state is None else initial_state
        self._regex_flags = config.regex_flags if regex_flags is None else regex_flags

        self._rules = RuleTable(rules)
        self._text: str | None = None
        self._text_len = 0
        self._scan = ScanState()
        self._states = StateStack(self._initial_state)

    # =========================================================================
    # Rule registration
    # =========================================================================

    def add_rule(
        self,
        pattern: str | re.Pattern[str],
        action: Action,
        *,
        states: str | Iterable[str] | None = None,
        with_location: bool = False,
    ) -> Rule:
        """Append a rule to the table.

        Args:
            pattern: Regular expression source or compiled pattern
            action: Called as action(text), or action(text, location) when
                with_location is set; returns a token or None to discard
            states: States the rule is active in (default: every state)
            with_location: Pass the Location where the match starts

        Returns:
            The registered rule

        Raises:
            ConfigurationError: Invalid pattern or action signature
        """
        rule = Rule.create(
            pattern,
            action,
            states=states,
            with_location=with_location,
            flags=self._regex_flags,
        )
        self._rules.add(rule)
        logger.debug(
            "Registered rule %r in states %s (%d rules)",
            rule.pattern.pattern,
            sorted(rule.states),
            len(self._rules),
        )
        return rule

    def add_token(
        self,
        pattern: str | re.Pattern[str],
        kind: Any,
        *,
        states: str | Iterable[str] | None = None,
    ) -> Rule:
        """Add a rule emitting Token(kind, text, location)."""

        def make_token(text: str, location: Location) -> Token:
            return Token(kind, text, location)

        return self.add_rule(pattern, make_token, states=states, with_location=True)

    def add_discard(
        self,
        pattern: str | re.Pattern[str],
        *,
        states: str | Iterable[str] | None = None,
    ) -> Rule:
        """Add a rule whose matches are consumed and dropped."""
        return self.add_rule(pattern, discard, states=states)

    def token(
        self,
        *patterns: str | re.Pattern[str],
        states: str | Iterable[str] | None = None,
        with_location: bool = False,
    ) -> Callable[[Action], Action]:
        """Decorator registering the decorated function as a rule action.

        One rule is added per pattern, in the order given. The function is
        returned unchanged.

        Raises:
            ConfigurationError: If no pattern is given
        """
        if not patterns:
            msg = "token() needs at least one pattern"
            raise ConfigurationError(msg)

        def decorator(action: Action) -> Action:
            for pattern in patterns:
                self.add_rule(pattern, action, states=states, with_location=with_location)
            return action

        return decorator

    @property
    def rules(self) -> RuleTable:
        return self._rules

    # =========================================================================
    # Input
    # =========================================================================

    def input(self, text: str) -> None:
        """Start a new scan session over `text`.

        Resets the cursor to offset 0, line 1, column 1 and the state stack
        to the initial state.
        """
        self._text = text
        self._text_len = len(text)
        self._scan = ScanState()
        self._states.reset(self._initial_state)

        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_input()
        logger.debug("New input: %d characters", self._text_len)

    def input_file(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> None:
        """Read a whole file and start scanning it."""
        self.input(read_source(path, encoding=encoding))

    def input_stream(self, stream: IO[str] | IO[bytes], encoding: str = "utf-8") -> None:
        """Read a stream to its end and start scanning the result."""
        self.input(read_source(stream, encoding=encoding))

    # =========================================================================
    # Scanning
    # =========================================================================

    def next(self) -> Any:
        """Produce the next token.

        Returns:
            The next token, or None at end of input (repeatedly).

        Raises:
            NoMatchError: If no eligible rule matches at the cursor
            ConfigurationError: If no input has been supplied
        """
        text = self._require_input()
        scan = self._scan
        acc = get_scan_accumulator()

        while scan.pos < self._text_len:
            state = self._states.current
            selected = select_match(self._rules, text, scan.pos, state, self._strategy)
            if selected is None:
                preview = text[scan.pos : scan.pos + _PREVIEW_LENGTH]
                raise NoMatchError(scan.location(), state, preview)

            rule, match = selected
            value = match.group()
            start = scan.location()
            scan.consume(value)
            token = rule.apply(value, start)

            if acc is not None:
                acc.record_match(len(value), token is not None)
            if token is not None:
                return token

        return None

    def tokenize(self) -> Iterator[Any]:
        """Yield tokens until end of input."""
        while True:
            token = self.next()
            if token is None:
                return
            yield token

    def __iter__(self) -> Iterator[Any]:
        return self.tokenize()

    def eof(self) -> bool:
        """Whether the cursor has reached the end of the input."""
        self._require_input()
        return self._scan.pos >= self._text_len

    def skip(self, count: int) -> None:
        """Advance the cursor by `count` characters without matching.

        Line and column are left untouched: keeping locations meaningful
        is up to the caller. The cursor stops at the end of the input.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            msg = f"Cannot skip a negative number of characters ({count})"
            raise ValueError(msg)
        self._require_input()
        self._scan.pos = min(self._scan.pos + count, self._text_len)

    def _require_input(self) -> str:
        if self._text is None:
            msg = "No input: call input() before scanning"
            raise ConfigurationError(msg)
        return self._text

    # =========================================================================
    # Position
    # =========================================================================

    @property
    def position(self) -> int:
        return self._scan.pos

    @property
    def line(self) -> int:
        return self._scan.line

    @property
    def column(self) -> int:
        return self._scan.column

    @property
    def location(self) -> Location:
        """A fresh Location for the cursor."""
        return self._scan.location()

    # =========================================================================
    # Lexical states
    # =========================================================================

    def enter(self, state: str) -> None:
        """Push `state`; it becomes the current state."""
        self._states.push(state)
        logger.debug("Entered state %r at %s", state, self._scan.location())

    def exit(self, state: str) -> None:
        """Pop `state`, which must be the current state.

        Raises:
            StateMismatchError: If the current state is not `state`
        """
        self._states.pop(state)
        logger.debug("Exited state %r at %s", state, self._scan.location())

    @property
    def current_state(self) -> str:
        return self._states.current

    @property
    def state_depth(self) -> int:
        return self._states.depth

    @property
    def initial_state(self) -> str:
        return self._initial_state

    # =========================================================================
    # Strategy
    # =========================================================================

    @property
    def match_strategy(self) -> MatchStrategy:
        return self._strategy

    @match_strategy.setter
    def match_strategy(self, strategy: MatchStrategy | str) -> None:
        self._strategy = _as_strategy(strategy)
        logger.debug("Match strategy set to %s", self._strategy.name)


def _as_strategy(strategy: MatchStrategy | str) -> MatchStrategy:
    if isinstance(strategy, MatchStrategy):
        return strategy
    return MatchStrategy.parse(strategy)


__all__ = ["Lexer", "ScanState"]
