"""
  Sable Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits the evaluator's values directly:

    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - integers -> int, decimals -> float
    - true / false -> bool
    - 'x  -> (quote x)
    - `x  -> (quasiquote x)
    - ,x  -> (unquote x)
    - ,@x -> (splice-unquote x)

The reader does no semantic checking: arity and type rules belong to the
evaluator.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from sable import SExpression
from sable.types.errors import SableSyntaxError
from sable.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>[\'`])"  # ' and `
    r"|(?P<unquote>,@|,)"  # , and ,@
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'`",;]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+(\.\d*)?[eE][+-]?\d+)")

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    ",": Symbol("unquote"),
    ",@": Symbol("splice-unquote"),
}

BOOLEANS = {"true": True, "false": False}

STRING_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
STRING_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            raise SableSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        for nm in TOKEN_RE.groupindex:
            if m.group(nm) is not None:
                if nm != "comment":
                    yield nm, m.group(nm)
                break


def parse_atom(tok_val: str) -> SExpression:
    if tok_val in BOOLEANS:
        return BOOLEANS[tok_val]
    if INT_RE.fullmatch(tok_val):
        return int(tok_val)
    if FLOAT_RE.fullmatch(tok_val):
        return float(tok_val)
    return Symbol(tok_val)


def decode_string(tok_val: str) -> str:
    """Strip the quotes from a string token and resolve its escapes.

    Only the escapes the printer produces are recognised; raw newlines and
    tabs inside the quotes are kept as they are.
    """

    def unescape(m: re.Match) -> str:
        ch = m.group(1)
        if ch not in STRING_ESCAPES:
            raise SableSyntaxError(f"Unknown escape \\{ch} in string literal {tok_val}")
        return STRING_ESCAPES[ch]

    return STRING_ESCAPE_RE.sub(unescape, tok_val[1:-1])


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
            raise SableSyntaxError("Unexpected end of input")

        if tok_type == "symbol":
            return parse_atom(tok_val)

        # Quote forms
        if tok_type in ("quote", "unquote"):
            if self.peek()[0] is None:
                raise SableSyntaxError(f"Expected a form after {tok_val!r}")
            return [QUOTE_FORMS[tok_val], self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise SableSyntaxError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SableSyntaxError("Unexpected ')'")

        # String
        if tok_type == "string":
            return decode_string(tok_val)

        raise SableSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Read every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def read_one(source: str) -> SExpression:
    """Read exactly one top-level form from `source`."""
    forms = read_all(source)
    if len(forms) != 1:
        raise SableSyntaxError(f"Expected exactly one form, found {len(forms)}")
    return forms[0]
