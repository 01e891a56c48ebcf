"""Recursive-descent parser support for Toybox.

parser/
├── __init__.py          # Re-exports
├── core.py              # Parser base class
└── queue.py             # LookaheadBuffer circular queue
"""

from toybox.parser.core import Parser
from toybox.parser.queue import LookaheadBuffer

__all__ = ["LookaheadBuffer", "Parser"]
