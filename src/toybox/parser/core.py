"""Base class for recursive-descent parsers with bounded lookahead.

A Parser pulls tokens from a Lexer into a LookaheadBuffer of capacity
lookahead + 1. Grammar code consumes tokens with token(), inspects up to
`lookahead` tokens past the current one with peek(), and reports grammar
violations with fail() or assert_that(). There is no backtracking and no
error recovery: the first ParserError ends the parse.

Past the end of input, token() and peek() return None.

Thread Safety:
Parser instances are not thread-safe and own their lexer exclusively
while parsing.

"""

from __future__ import annotations

from typing import Any, NoReturn

from toybox.errors import ConfigurationError, LookaheadExceededError, ParserError
from toybox.lexer.core import Lexer
from toybox.location import Location
from toybox.parser.queue import LookaheadBuffer


class Parser:
    """Top-down parser base with LL(k) lookahead.

    Subclass it and write one method per grammar production:

        class ListParser(Parser):
            def parse_list(self):
                self.expect("LBRACKET")
                items = []
                while not self.at("RBRACKET"):
                    items.append(int(self.expect("NUMBER").text))
                    if not self.at("RBRACKET"):
                        self.expect("COMMA")
                self.expect("RBRACKET")
                return items

        lexer = make_list_lexer()
        lexer.input("[1, 2, 3]")
        ListParser(lexer).parse_list()  # [1, 2, 3]

    The lexer must have its input before the parser is built: the first
    token is fetched immediately.

    """

    __slots__ = ("_lexer", "_lookahead", "_tokens")

    def __init__(self, lexer: Lexer, lookahead: int = 0) -> None:
        """Initialize parser and prefetch the first token.

        Args:
            lexer: Lexer with input already supplied
            lookahead: How many tokens past the current one peek() may see

        Raises:
            ConfigurationError: If lookahead is negative or the lexer has
                no input
        """
        if lookahead < 0:
            msg = f"Lookahead must be >= 0, got {lookahead}"
            raise ConfigurationError(msg)
        self._lexer = lexer
        self._lookahead = lookahead
        self._tokens: LookaheadBuffer[Any] = LookaheadBuffer(lookahead + 1)

        self._advance()

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    @property
    def lookahead(self) -> int:
        return self._lookahead

    # =========================================================================
    # Token stream
    # =========================================================================

    def _advance(self) -> None:
        self._tokens.put(self._lexer.next())

    def token(self) -> Any:
        """Consume the current token and return it."""
        token = self._tokens.take()
        self._advance()
        return token

    def peek(self, index: int = 0) -> Any:
        """Look at a token without consuming it.

        Args:
            index: 0 for the current token, up to `lookahead`

        Returns:
            The token, or None if the input ends before it

        Raises:
            LookaheadExceededError: If index > lookahead
        """
        if index < 0 or index > self._lookahead:
            raise LookaheadExceededError(index, self._lookahead)
        while self._tokens.size < index + 1:
            self._advance()
        return self._tokens.get(index)

    def at_end(self) -> bool:
        """Whether every token has been consumed."""
        return self.peek() is None

    def at(self, kind: Any, index: int = 0) -> bool:
        """Whether the token at `index` has the given kind.

        For tokens with a `kind` attribute, like toybox.tokens.Token.
        """
        token = self.peek(index)
        return token is not None and getattr(token, "kind", None) == kind

    def expect(self, kind: Any, message: str | None = None) -> Any:
        """Consume the current token, failing unless it has `kind`.

        Raises:
            ParserError: If the current token is missing or of another kind
        """
        token = self.peek()
        if token is None or getattr(token, "kind", None) != kind:
            found = "end of input" if token is None else repr(getattr(token, "text", token))
            self.fail(message or f"Expected {kind}, found {found}", token)
        return self.token()

    # =========================================================================
    # Failure reporting
    # =========================================================================

    def fail(self, message: str, location: Location | Any = None) -> NoReturn:
        """Abort the parse with a ParserError.

        Args:
            message: Error description
            location: A Location, or a token with a `location` attribute.
                Defaults to the lexer's current location.

        Raises:
            ParserError: Always
        """
        raise ParserError(message, self._resolve_location(location))

    def assert_that(self, condition: bool, message: str, location: Location | Any = None) -> None:
        """Fail with `message` unless `condition` holds.

        Raises:
            ParserError: If condition is false
        """
        if not condition:
            self.fail(message, location)

    def _resolve_location(self, location: Location | Any) -> Location:
        if isinstance(location, Location):
            return location
        token_location = getattr(location, "location", None)
        if isinstance(token_location, Location):
            return token_location
        return self._lexer.location


__all__ = ["Parser"]
