"""Rule-table driven lexer for Toybox.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── core.py              # Lexer class and its ScanState cursor
├── rules.py             # Rule, RuleTable, ActionKind
├── states.py            # StateStack, INITIAL, WILDCARD
├── strategy.py          # MatchStrategy and candidate selection
└── patterns.py          # Frequently used regular expressions

Usage:
    from toybox.lexer import Lexer

    lexer = Lexer()
    lexer.add_token(r"[a-z]+", "WORD")
    lexer.add_discard(r"\\s+")
    lexer.input("hello world")
    [token.text for token in lexer.tokenize()]  # ['hello', 'world']

"""

from toybox.lexer import patterns
from toybox.lexer.core import Lexer, ScanState
from toybox.lexer.rules import ActionKind, Rule, RuleTable
from toybox.lexer.states import INITIAL, WILDCARD, StateStack
from toybox.lexer.strategy import MatchStrategy, select_match

__all__ = [
    "INITIAL",
    "WILDCARD",
    "ActionKind",
    "Lexer",
    "MatchStrategy",
    "Rule",
    "RuleTable",
    "ScanState",
    "StateStack",
    "patterns",
    "select_match",
]
