"""
  minilisp Reader: Lexer and Parser

- Regex-driven lexer yielding (token_type, token_value) tuples
- Recursive-descent parser over a buffered TokenStream
- Emits plain Python values:

    - numbers -> float (ASCII atoms float() accepts, except underscore forms)
    - symbols -> Symbol
    - lists   -> tuple

There are no strings, comments or quote forms; every run of characters that is
not whitespace or a parenthesis is one literal atom. Other control characters
are rejected by the lexer.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from minilisp import Expression
from minilisp.errors import LispLexError, LispSyntaxError, LispEOFError
from minilisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s()\x00-\x1f\x7f]+)"  # literal atom, no control characters
    r")",
    re.DOTALL,
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise LispLexError(f"Unknown token at {pos}: {source[pos]!r}")
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                pos = m.end()
                break


def read_atom(text: str) -> Expression:
    """Number if `text` reads as a 64-bit float, otherwise a Symbol."""
    if text.isascii() and "_" not in text:
        try:
            return float(text)
        except ValueError:
            pass
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
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

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> Expression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise LispEOFError("Unexpected end of input!")

        if tok_type == "symbol":
            return read_atom(tok_val)

        if tok_type == "rparen":
            raise LispSyntaxError("Unexpected ) encountered!")

        # List
        items = []
        while True:
            next_type = self.peek()[0]
            if next_type == "rparen":
                self.advance()
                return tuple(items)
            if next_type is None:
                raise LispSyntaxError("Unclosed delimiter!")
            items.append(self.parse_expr())


def parse(source: str | Iterable[tuple[str, str]]) -> Expression:
    """Read exactly one expression from source text (or an existing token iterable)."""
    tokens = lex(source) if isinstance(source, str) else source
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    if not stream.at_end():
        raise LispSyntaxError("Unexpected input after expression!")
    return expr
