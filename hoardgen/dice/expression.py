"""Constrained arithmetic for value multipliers written in table text.

Only integer literals, ``+``, ``-``, ``*``, ``/`` and parentheses are
accepted. Results are exact fractions so "1/2" stays one half.
"""

import re
from fractions import Fraction

TOKEN_PATTERN = re.compile(r"\s*(?:(\d+)|(.))")


def _tokenize(text: str) -> list[str]:
    tokens = []
    for number, symbol in TOKEN_PATTERN.findall(text):
        if number:
            tokens.append(number)
        elif symbol.strip():
            if symbol not in "+-*/()":
                raise ValueError(f"Unexpected character {symbol!r} in {text!r}")
            tokens.append(symbol)
    return tokens


class _Parser:
    """Recursive descent over the token list."""

    def __init__(self, tokens: list[str], text: str):
        self.tokens = tokens
        self.text = text
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self) -> str:
        token = self.peek()
        if token is None:
            raise ValueError(f"Unexpected end of expression {self.text!r}")
        self.pos += 1
        return token

    def expression(self) -> Fraction:
        value = self.term()
        while self.peek() in ("+", "-"):
            if self.take() == "+":
                value += self.term()
            else:
                value -= self.term()
        return value

    def term(self) -> Fraction:
        value = self.factor()
        while self.peek() in ("*", "/"):
            if self.take() == "*":
                value *= self.factor()
            else:
                divisor = self.factor()
                if divisor == 0:
                    raise ValueError(f"Division by zero in {self.text!r}")
                value /= divisor
        return value

    def factor(self) -> Fraction:
        token = self.take()
        if token == "(":
            value = self.expression()
            if self.take() != ")":
                raise ValueError(f"Unbalanced parentheses in {self.text!r}")
            return value
        if token.isdigit():
            return Fraction(int(token))
        raise ValueError(f"Unexpected token {token!r} in {self.text!r}")


def evaluate_expression(text: str) -> Fraction:
    """Evaluate an arithmetic expression such as "2", "1/2" or "1+1".

    Raises:
        ValueError: If the expression is empty or malformed.
    """
    tokens = _tokenize(text)
    if not tokens:
        raise ValueError("Empty expression")

    parser = _Parser(tokens, text)
    value = parser.expression()
    if parser.peek() is not None:
        raise ValueError(f"Trailing input in {text!r}")
    return value
