"""Nested /* block */ comments with lexical states.

Every "/*" pushes COMMENT, every "*/" pops it, so comments nest to any
depth. Rules tagged INITIAL never fire inside a comment.
"""

from toybox import Lexer, Token, patterns

COMMENT = "COMMENT"


def make_lexer() -> Lexer:
    lexer = Lexer()

    lexer.add_rule(r"/\*", lambda text: lexer.enter(COMMENT), states=("INITIAL", COMMENT))
    lexer.add_rule(r"\*/", lambda text: lexer.exit(COMMENT), states=COMMENT)
    lexer.add_discard(r"[^/*]+|[/*]", states=COMMENT)

    lexer.add_discard(patterns.WHITESPACE, states="INITIAL")
    lexer.add_token(patterns.IDENTIFIER, "IDENT", states="INITIAL")
    lexer.add_token(patterns.INTEGER, "INT", states="INITIAL")
    return lexer


def strip_comments(text: str) -> list[Token]:
    """Tokenize `text`, dropping comments.

    Raises:
        ValueError: If a comment is still open at the end of the input
        NoMatchError: On a stray "*/" or any other unknown character
    """
    lexer = make_lexer()
    lexer.input(text)
    tokens = list(lexer.tokenize())
    if lexer.current_state == COMMENT:
        msg = f"Unterminated comment at end of input ({lexer.location})"
        raise ValueError(msg)
    return tokens


if __name__ == "__main__":
    source = "a /* outer /* inner */ still outer */ b\n/* 2\nlines */ 42"
    for token in strip_comments(source):
        print(token)
