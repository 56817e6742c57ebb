"""
  Scheep Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of Cons cells:

    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - #t / #f (#true / #false) -> bool
    - 'x -> [quote, x]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from scheep import SExpression
from scheep.errors import ScheepSyntaxError
from scheep.types.symbol import QUOTE, Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>"(?:\\.|[^\\"])*$)'  # string running off the end of input
    r"|(?P<boolean>#(?:true|false|t|f)(?![^\s()';]))"  # booleans
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+$")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

STRING_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            if source[pos:].strip() == "":
                break
            raise ScheepSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        if kind == "unterminated":
            raise ScheepSyntaxError("Unterminated string literal")
        yield kind, m.group(kind)


def decode_string(tok_val: str) -> str:
    """Strip the quotes and decode escapes; raw newlines are kept as written."""

    def unescape(m: re.Match) -> str:
        try:
            return STRING_ESCAPES[m.group(1)]
        except KeyError:
            raise ScheepSyntaxError(f"Unknown string escape: \\{m.group(1)}") from None

    return ESCAPE_RE.sub(unescape, tok_val[1:-1])


def parse_atom(tok_val: str) -> SExpression:
    if INT_RE.match(tok_val):
        return int(tok_val)
    if FLOAT_RE.match(tok_val):
        return float(tok_val)
    return Symbol(tok_val)


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
            raise ScheepSyntaxError("Unexpected end of input")

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "boolean":
            return tok_val in ("#t", "#true")

        if tok_type == "string":
            return decode_string(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise ScheepSyntaxError("Quote at end of input")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise ScheepSyntaxError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise ScheepSyntaxError("Unexpected ')'")

        raise ScheepSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Parse every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
