"""
  Lisp Reader: tokenizer and recursive-descent parser

- One expression per input line
- Emits Python primitives instead of Cons cells:

    - lists -> Python list
    - symbols -> Symbol
    - numbers -> int/float

Tokens are consumed left to right through an index cursor over an immutable
token tuple, so the points of failure match a destructive pop-from-the-front
reader exactly.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from lispy import SExpression
from lispy.errors import LispySyntaxError
from lispy.types.symbol import Symbol

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"


def tokenize(text: str) -> list[str]:
    """Convert a string of characters into a list of tokens."""
    return text.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ").split()


def _numeric_spelling(token: str) -> bool:
    # float() also accepts inf, nan, infinity and 1_000; those stay symbols
    return "_" not in token and any(c.isdigit() for c in token)


def atom(token: str) -> int | float | Symbol:
    """Numbers become numbers; every other token is a symbol.

    A float parse decides whether the token is numeric at all; numeric tokens
    that are also integer literals stay exact. Only digit spellings count, so
    `inf` and `nan` name the math constants instead of being read as them.
    """
    if not _numeric_spelling(token):
        return Symbol(token)
    try:
        value = float(token)
    except ValueError:
        pass
    else:
        try:
            return int(token)
        except ValueError:
            return value
    try:
        return int(token)
    except ValueError:
        return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens: tuple[str, ...] = tuple(tokens)
        self.pos = 0

    def exhausted(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Optional[str]:
        if self.exhausted():
            return None
        return self.tokens[self.pos]

    def advance(self) -> str:
        if self.exhausted():
            raise LispySyntaxError("unexpected EOF")
        token = self.tokens[self.pos]
        self.pos += 1
        return token


def read_from_tokens(stream: TokenStream) -> SExpression:
    """Read one expression from a token stream."""
    token = stream.advance()
    if token == LPAREN:
        items: list[SExpression] = []
        while stream.peek() != RPAREN:
            items.append(read_from_tokens(stream))
        stream.advance()  # consume ')'
        return items
    if token == RPAREN:
        raise LispySyntaxError("unexpected )")
    return atom(token)


def parse(text: str) -> SExpression:
    """Read exactly one Lisp expression from a string."""
    stream = TokenStream(tokenize(text))
    expr = read_from_tokens(stream)
    if not stream.exhausted():
        if stream.peek() == RPAREN:
            raise LispySyntaxError("unexpected )")
        raise LispySyntaxError("unexpected trailing input")
    logger.debug("parsed %r", expr)
    return expr
