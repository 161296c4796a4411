"""
  Lisp Reader, Lexer and Parser

- Regex lexer yielding (token_type, token_value) pairs
- TokenStream parses lazily, one top-level expression at a time
- parse() reads a whole text eagerly, so a syntax error anywhere rejects it

Forms are built from Eta values:

    - () / nil -> Nil
    - lists -> right-nested Pair chains ending in Nil
    - dotted lists -> Pair chains ending in the dotted tail
    - #t / #f -> True / False
    - numbers -> float
    - strings -> str
    - everything else -> Symbol
    - 'x -> (quote x)
"""

from __future__ import annotations

import math
import re
from typing import Iterator, Optional

from eta import SExpression
from eta.errors import EtaSyntaxError
from eta.types.nil import Nil
from eta.types.pair import make_list
from eta.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<bad_string>")'  # an opening quote with no closing one
    r"|(?P<symbol>[^\s()'\";]+)",  # fallback: atoms
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

QUOTE = Symbol("quote")
DOT = "."

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        # every character matches some alternative, but keep the guard
        if not m:
            raise EtaSyntaxError(f"unexpected character {source[pos]!r} at col {pos}")
        kind = m.lastgroup
        if kind == "bad_string":
            raise EtaSyntaxError(f"unterminated string starting at col {pos}")
        if kind not in ("whitespace", "comment"):
            yield kind, m.group(kind)
        pos = m.end()


def read_string(token: str) -> str:
    """Decode the body of a string token, resolving backslash escapes."""
    body = token[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            nxt = body[i + 1]
            if nxt not in STRING_ESCAPES:
                raise EtaSyntaxError(f"unknown string escape \\{nxt}")
            out.append(STRING_ESCAPES[nxt])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def read_atom(token: str) -> SExpression:
    if token == "#t":
        return True
    if token == "#f":
        return False
    if token == "nil":
        return Nil
    if NUMBER_RE.fullmatch(token):
        value = float(token)
        if not math.isfinite(value):
            raise EtaSyntaxError(f"number literal out of range: {token}")
        return value
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise EtaSyntaxError("unexpected end of input")

        if tok_type == "symbol":
            if tok_val == DOT:
                raise EtaSyntaxError("unexpected '.' outside of a list")
            return read_atom(tok_val)

        if tok_type == "string":
            return read_string(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise EtaSyntaxError("expected an expression after quote")
            return make_list([QUOTE, self.parse_expr()])

        if tok_type == "lparen":
            return self._parse_list()

        if tok_type == "rparen":
            raise EtaSyntaxError("unexpected ')'")

        raise EtaSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def _parse_list(self) -> SExpression:
        items: list[SExpression] = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise EtaSyntaxError("expected closing ')'")
            if tok_type == "rparen":
                self.advance()
                return make_list(items)
            if tok_type == "symbol" and tok_val == DOT:
                self.advance()
                if not items:
                    raise EtaSyntaxError("expected an expression before '.'")
                tail = self.parse_expr()
                if self.peek()[0] != "rparen":
                    raise EtaSyntaxError("expected ')' after dotted tail")
                self.advance()
                return make_list(items, tail)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek()[0] is not None:
            yield self.parse_expr()


def parse(text: str) -> list[SExpression]:
    """Parse every top-level expression in text.

    Raises EtaSyntaxError on unbalanced parentheses or malformed tokens.
    """
    return list(TokenStream(lex(text)).parse_all())
