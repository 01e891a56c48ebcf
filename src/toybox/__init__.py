"""
Toybox — building blocks for hand-written lexers and parsers

A lexer driven by an ordered table of regular-expression rules with
stacked lexical states, and a recursive-descent parser base class with
bounded lookahead. Zero runtime dependencies.

Quick Start:
    >>> from toybox import Lexer, Parser
    >>> lexer = Lexer()
    >>> lexer.add_token(r"[0-9]+", "NUMBER")
    >>> lexer.add_token(r"\\+", "PLUS")
    >>> lexer.add_discard(r"\\s+")
    >>> lexer.input("1 + 2")
    >>>
    >>> class Sum(Parser):
    ...     def parse(self):
    ...         total = int(self.expect("NUMBER").text)
    ...         while self.at("PLUS"):
    ...             self.token()
    ...             total += int(self.expect("NUMBER").text)
    ...         self.assert_that(self.at_end(), "Trailing input")
    ...         return total
    >>>
    >>> Sum(lexer).parse()
    3

Lexical states (block comments, string bodies...) are shown in
examples/states/nested_comments.py.
"""

from collections.abc import Iterable
from typing import Any

from toybox.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from toybox.errors import (
    BufferEmptyError,
    BufferFullError,
    ConfigurationError,
    LookaheadBufferError,
    LookaheadExceededError,
    NoMatchError,
    ParserError,
    StateMismatchError,
    ToyboxError,
)
from toybox.lexer import (
    INITIAL,
    WILDCARD,
    ActionKind,
    Lexer,
    MatchStrategy,
    Rule,
    RuleTable,
    ScanState,
    StateStack,
    patterns,
    select_match,
)
from toybox.location import Location
from toybox.parser import LookaheadBuffer, Parser
from toybox.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from toybox.source import read_source
from toybox.tokens import Token, discard

__version__ = "0.1.0"


def tokenize(
    text: str,
    rules: Iterable[Rule],
    *,
    match_strategy: MatchStrategy | str | None = None,
) -> list[Any]:
    """Scan a whole string with a set of rules.

    Args:
        text: Input text
        rules: Rules in declaration order (see Rule.create)
        match_strategy: Overrides the configured strategy

    Returns:
        Every token, in input order

    Raises:
        NoMatchError: If some position is not covered by any rule

    Example:
        >>> rules = [
        ...     Rule.create(r"[a-z]+", str.upper),
        ...     Rule.create(r"\\s+", discard),
        ... ]
        >>> tokenize("ab cd", rules)
        ['AB', 'CD']
    """
    lexer = Lexer(rules, match_strategy=match_strategy)
    lexer.input(text)
    return list(lexer.tokenize())


__all__ = [
    # Core API
    "Lexer",
    "Parser",
    "tokenize",
    # Lexer building blocks
    "INITIAL",
    "WILDCARD",
    "ActionKind",
    "MatchStrategy",
    "Rule",
    "RuleTable",
    "ScanState",
    "StateStack",
    "patterns",
    "select_match",
    # Parser building blocks
    "LookaheadBuffer",
    # Values
    "Location",
    "Token",
    "discard",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Input
    "read_source",
    # Errors
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
