"""
  Lisp Reader: tokenizer and parser

- Tokens are plain strings: "(", ")" or a maximal run of anything else that
  is not whitespace.
- No comment syntax, and strings are not special-cased while tokenizing: a
  string literal with interior spaces splits into several tokens.
- The parser emits Python values directly:

    - numbers -> float
    - "text"  -> str (quotes stripped, no escape processing)
    - nil / t -> Nil / T
    - lists   -> Python list
    - other   -> Symbol
"""

from __future__ import annotations

import re
from collections import deque
from typing import Iterable

from ducklisp import SExpression
from ducklisp.errors import LispSyntaxError
from ducklisp.types.boolean import Nil, T
from ducklisp.types.symbol import Symbol


TOKEN_RE = re.compile(r"\(|\)|[^\s()]+")

# Decimal literals only; float() alone would also accept inf, nan and 1_000
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# Infinite doubles are written the way the printer spells them
INFINITIES = {
    "Infinity": float("inf"),
    "+Infinity": float("inf"),
    "-Infinity": float("-inf"),
}


def tokenize(source: str) -> list[str]:
    """Split source text into parenthesis and atom tokens."""
    return TOKEN_RE.findall(source)


def parse_atom(token: str) -> SExpression:
    if NUMBER_RE.fullmatch(token):
        return float(token)
    if token in INFINITIES:
        return INFINITIES[token]
    if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
        return token[1:-1]
    if token == "nil":
        return Nil
    if token == "t":
        return T
    return Symbol(token)


class TokenStream:
    """Consumes tokens from the front, one expression per parse_expr call."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: deque[str] = deque(tokens)

    def peek(self) -> str | None:
        return self.tokens[0] if self.tokens else None

    def advance(self) -> str:
        return self.tokens.popleft()

    def at_end(self) -> bool:
        return not self.tokens

    def parse_expr(self) -> SExpression:
        if self.at_end():
            raise LispSyntaxError("unexpected end of input")

        token = self.advance()
        if token == "(":
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispSyntaxError("unclosed parenthesis")
                if nxt == ")":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if token == ")":
            raise LispSyntaxError("unexpected closing paren")

        return parse_atom(token)


def read(source: str) -> SExpression:
    """Read the first complete expression in `source`; trailing tokens are ignored."""
    return TokenStream(tokenize(source)).parse_expr()
