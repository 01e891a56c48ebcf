"""Tokenize a line of text with two rules — words and whitespace."""

from toybox import Lexer

lexer = Lexer()
lexer.add_token(r"[A-Za-z]+", "IDENT")
lexer.add_discard(r"\s+")

lexer.input("hello toybox world")
for token in lexer.tokenize():
    print(token)
