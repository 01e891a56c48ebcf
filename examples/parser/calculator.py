"""LL(1) arithmetic calculator — a recursive-descent Parser.

Grammar:
    expr   := term (("+" | "-") term)*
    term   := factor (("*" | "/") factor)*
    factor := NUMBER | "-" factor | "(" expr ")"

Run:
    python examples/parser/calculator.py "2 * (3 + 4) - 1"
"""

import sys

from toybox import Lexer, Parser, patterns


def make_lexer() -> Lexer:
    lexer = Lexer()
    lexer.add_discard(patterns.WHITESPACE)
    lexer.add_token(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+", "NUMBER")
    lexer.add_token(patterns.PLUS, "+")
    lexer.add_token(patterns.MINUS, "-")
    lexer.add_token(patterns.TIMES, "*")
    lexer.add_token(patterns.DIV, "/")
    lexer.add_token(patterns.L_PAREN, "(")
    lexer.add_token(patterns.R_PAREN, ")")
    return lexer


class Calculator(Parser):
    def parse(self) -> float:
        value = self.expr()
        if not self.at_end():
            token = self.peek()
            self.fail(f"Unexpected {token.text!r}", token)
        return value

    def expr(self) -> float:
        value = self.term()
        while self.at("+") or self.at("-"):
            if self.token().kind == "+":
                value += self.term()
            else:
                value -= self.term()
        return value

    def term(self) -> float:
        value = self.factor()
        while self.at("*") or self.at("/"):
            op = self.token()
            right = self.factor()
            if op.kind == "*":
                value *= right
            else:
                self.assert_that(right != 0, "Division by zero", op)
                value /= right
        return value

    def factor(self) -> float:
        if self.at("-"):
            self.token()
            return -self.factor()
        if self.at("("):
            self.token()
            value = self.expr()
            self.expect(")", "Missing closing parenthesis")
            return value
        return float(self.expect("NUMBER", "Expected a number").text)


def evaluate(text: str) -> float:
    lexer = make_lexer()
    lexer.input(text)
    return Calculator(lexer).parse()


if __name__ == "__main__":
    print(evaluate(" ".join(sys.argv[1:]) or "1 + 2 * 3"))
