"""Error construction, formatting, and hierarchy."""

import pytest

from toybox import (
    BufferEmptyError,
    BufferFullError,
    ConfigurationError,
    Location,
    LookaheadBufferError,
    LookaheadExceededError,
    NoMatchError,
    ParserError,
    StateMismatchError,
    ToyboxError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_class",
        [
            ConfigurationError,
            StateMismatchError,
            NoMatchError,
            LookaheadExceededError,
            LookaheadBufferError,
            BufferFullError,
            BufferEmptyError,
            ParserError,
        ],
    )
    def test_is_toybox_error(self, error_class: type) -> None:
        assert issubclass(error_class, ToyboxError)

    def test_buffer_empty_is_lookup_error(self) -> None:
        assert issubclass(BufferEmptyError, LookupError)


class TestStateMismatchError:
    def test_mismatch_message(self) -> None:
        err = StateMismatchError("STRING", "COMMENT")
        assert err.expected == "STRING"
        assert err.actual == "COMMENT"
        assert str(err) == "Cannot exit state 'STRING': current state is 'COMMENT'"

    def test_last_state_message(self) -> None:
        err = StateMismatchError("INITIAL", None)
        assert "only state" in str(err)


class TestNoMatchError:
    def test_message(self) -> None:
        err = NoMatchError(Location(3, 9), "INITIAL", "@@")
        assert str(err) == "No match at line 3, column 9 (next input '@@') in state 'INITIAL'"
        assert err.line == 3
        assert err.column == 9

    def test_without_preview(self) -> None:
        err = NoMatchError(Location(1, 1), "S")
        assert "next input" not in str(err)


class TestLookaheadExceededError:
    def test_message(self) -> None:
        err = LookaheadExceededError(3, 1)
        assert "peek(3)" in str(err)
        assert "lookahead 1" in str(err)


class TestParserError:
    def test_message_and_location(self) -> None:
        err = ParserError("Expected ')'", Location(4, 2))
        assert err.message == "Expected ')'"
        assert err.location == Location(4, 2)
        assert str(err) == "Expected ')' at line 4, column 2"


class TestLocation:
    def test_value_equality(self) -> None:
        assert Location(1, 2) == Location(1, 2)
        assert Location(1, 2) != Location(2, 1)
        assert hash(Location(5, 5)) == hash(Location(5, 5))

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Location(1, 1).line = 2  # type: ignore[misc]
