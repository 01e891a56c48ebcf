"""Tests for the scanning loop: emitted tokens, discards, end of input."""

from __future__ import annotations

import pytest

from toybox import ConfigurationError, Lexer, Location, NoMatchError, Token


class TestIdentifiersAndWhitespace:
    """The basic two-rule scenario."""

    def test_foo_bar(self, word_lexer: Lexer) -> None:
        word_lexer.input("foo bar")

        assert word_lexer.next() == Token("IDENT", "foo", Location(1, 1))
        assert word_lexer.next() == Token("IDENT", "bar", Location(1, 5))
        assert word_lexer.next() is None

    def test_end_of_input_is_repeatable(self, word_lexer: Lexer) -> None:
        word_lexer.input("foo")
        word_lexer.next()

        assert word_lexer.next() is None
        assert word_lexer.next() is None
        assert word_lexer.eof()

    def test_empty_input(self, word_lexer: Lexer) -> None:
        word_lexer.input("")
        assert word_lexer.eof()
        assert word_lexer.next() is None

    def test_trailing_discard_reaches_end(self, word_lexer: Lexer) -> None:
        word_lexer.input("foo   ")
        assert word_lexer.next().text == "foo"
        assert not word_lexer.eof()
        assert word_lexer.next() is None
        assert word_lexer.eof()

    def test_tokenize_collects_all(self, word_lexer: Lexer) -> None:
        word_lexer.input("  one two\nthree ")
        texts = [token.text for token in word_lexer.tokenize()]
        assert texts == ["one", "two", "three"]

    def test_iteration_protocol(self, word_lexer: Lexer) -> None:
        word_lexer.input("a b")
        assert [token.text for token in word_lexer] == ["a", "b"]


class TestNoMatch:
    """Positions no eligible rule covers."""

    def test_digit_then_letter(self) -> None:
        lexer = Lexer()
        lexer.add_token(r"[0-9]+", "DIGITS")
        lexer.input("1a")

        assert lexer.next() == Token("DIGITS", "1", Location(1, 1))
        with pytest.raises(NoMatchError) as exc_info:
            lexer.next()

        err = exc_info.value
        assert err.location == Location(1, 2)
        assert err.line == 1
        assert err.column == 2
        assert err.preview == "a"
        assert "line 1, column 2" in str(err)

    def test_cursor_does_not_move_on_failure(self) -> None:
        lexer = Lexer()
        lexer.add_token(r"[0-9]+", "DIGITS")
        lexer.input("12x")
        lexer.next()

        with pytest.raises(NoMatchError):
            lexer.next()
        assert lexer.position == 2

    def test_match_elsewhere_is_not_a_candidate(self) -> None:
        """A pattern that matches later in the input does not count."""
        lexer = Lexer()
        lexer.add_token(r"b", "B")
        lexer.input("ab")

        with pytest.raises(NoMatchError) as exc_info:
            lexer.next()
        assert exc_info.value.location == Location(1, 1)

    def test_no_rules_at_all(self) -> None:
        lexer = Lexer()
        lexer.input("x")
        with pytest.raises(NoMatchError):
            lexer.next()

    def test_preview_is_truncated(self) -> None:
        lexer = Lexer()
        lexer.input("x" * 50)
        with pytest.raises(NoMatchError) as exc_info:
            lexer.next()
        assert exc_info.value.preview == "x" * 10


class TestDiscard:
    """Actions returning None."""

    def test_discarded_span_moves_location(self) -> None:
        lexer = Lexer()
        lexer.add_token(r"[a-z]+", "WORD")
        lexer.add_discard(r"#[^\n]*\n")
        lexer.input("# comment\nword")

        token = lexer.next()
        assert token == Token("WORD", "word", Location(2, 1))

    def test_custom_action_returning_none(self) -> None:
        seen: list[str] = []

        def remember(text: str) -> None:
            seen.append(text)

        lexer = Lexer()
        lexer.add_rule(r"[0-9]", remember)
        lexer.add_token(r"[a-z]", "LETTER")
        lexer.input("1a2b3")

        texts = [token.text for token in lexer.tokenize()]
        assert texts == ["a", "b"]
        assert seen == ["1", "2", "3"]

    def test_falsy_tokens_are_emitted(self) -> None:
        """Only None means discard."""
        lexer = Lexer()
        lexer.add_rule(r"[0-9]", int)
        lexer.input("010")
        assert list(lexer.tokenize()) == [0, 1, 0]


class TestActions:
    """What actions receive and how their failures surface."""

    def test_text_only_action(self) -> None:
        lexer = Lexer()
        lexer.add_rule(r"[0-9]+", lambda text: int(text) * 2)
        lexer.input("21")
        assert lexer.next() == 42

    def test_location_is_match_start(self) -> None:
        received: list[tuple[str, Location]] = []

        def record(text: str, location: Location) -> str:
            received.append((text, location))
            return text

        lexer = Lexer()
        lexer.add_rule(r"[a-z]+", record, with_location=True)
        lexer.add_discard(r"\s+")
        lexer.input("ab\n  cd")
        list(lexer.tokenize())

        assert received == [("ab", Location(1, 1)), ("cd", Location(2, 3))]

    def test_action_exception_propagates(self) -> None:
        def explode(text: str) -> None:
            raise RuntimeError("boom")

        lexer = Lexer()
        lexer.add_rule(r"x", explode)
        lexer.input("x")
        with pytest.raises(RuntimeError, match="boom"):
            lexer.next()

    def test_decorator_registration(self) -> None:
        lexer = Lexer()

        @lexer.token(r"[0-9]+")
        def number(text: str) -> int:
            return int(text)

        @lexer.token(r"\s+")
        def spaces(text: str) -> None:
            return None

        lexer.input("1 22 333")
        assert list(lexer.tokenize()) == [1, 22, 333]
        assert number("7") == 7

    def test_decorator_with_location(self) -> None:
        lexer = Lexer()

        @lexer.token(r"[a-z]+", with_location=True)
        def word(text: str, location: Location) -> tuple[str, int]:
            return text, location.column

        lexer.input("abc")
        assert lexer.next() == ("abc", 1)


class TestInputReset:
    """input() starts a fresh session."""

    def test_reset_position_and_location(self, word_lexer: Lexer) -> None:
        word_lexer.input("one\ntwo")
        list(word_lexer.tokenize())
        assert word_lexer.line == 2

        word_lexer.input("three")
        assert word_lexer.position == 0
        assert word_lexer.location == Location(1, 1)
        assert word_lexer.next().text == "three"

    def test_reset_state_stack(self, word_lexer: Lexer) -> None:
        word_lexer.input("x")
        word_lexer.enter("STRING")
        word_lexer.enter("ESCAPE")

        word_lexer.input("y")
        assert word_lexer.current_state == "INITIAL"
        assert word_lexer.state_depth == 1

    def test_rules_survive_reset(self, word_lexer: Lexer) -> None:
        word_lexer.input("a")
        word_lexer.input("b")
        assert len(word_lexer.rules) == 2
        assert word_lexer.next().text == "b"

    def test_scanning_without_input(self, word_lexer: Lexer) -> None:
        with pytest.raises(ConfigurationError, match="No input"):
            word_lexer.next()
        with pytest.raises(ConfigurationError):
            word_lexer.eof()
