"""Shared fixtures for the Toybox test-suite."""

from __future__ import annotations

import pytest

from toybox import Lexer, reset_scan_config


@pytest.fixture(autouse=True)
def _default_scan_config():
    """Every test starts and ends with the default ScanConfig."""
    reset_scan_config()
    yield
    reset_scan_config()


@pytest.fixture
def word_lexer() -> Lexer:
    """IDENT tokens for letters, whitespace discarded."""
    lexer = Lexer()
    lexer.add_token(r"[A-Za-z]+", "IDENT")
    lexer.add_discard(r"\s+")
    return lexer


@pytest.fixture
def abc_lexer() -> Lexer:
    """One token per letter a, b or c; whitespace discarded."""
    lexer = Lexer()
    lexer.add_token(r"[abc]", "LETTER")
    lexer.add_discard(r"\s+")
    return lexer
