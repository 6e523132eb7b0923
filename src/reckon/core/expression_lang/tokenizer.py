"""
Tokenizer for reckon arithmetic expressions.

The Lexer hands out one token per ``next_token()`` call so the parser can
pull tokens on demand.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from enum import StrEnum, auto

from reckon.core.errors import LexError, make_error

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()

    # Punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()

    # End of input
    END = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: float | str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


# Maximal run of digits and decimal points
_NUMBER_RE = re.compile(r"[0-9.]+")
# ASCII only; str.isdigit() also accepts superscripts and other scripts
_NUMBER_CHARS = frozenset("0123456789.")

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}


class Lexer:
    """Cursor over an expression string."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        # Every token handed out so far, in order
        self.tokens: list[Token] = []

    def next_token(self) -> Token:
        """Scan and return the next token.

        Returns END once the input is exhausted, on every later call too.

        Raises:
            LexError: If the next character does not start a token, or a
                number literal cannot be read as a float. The lexer must
                not be used again after this.
        """
        source = self.source
        n = len(source)

        while self.pos < n and source[self.pos].isspace():
            self.pos += 1

        if self.pos >= n:
            self.pos = n
            return self._emit(Token(TokenKind.END, "", n))

        start = self.pos
        c = source[start]

        if c in _NUMBER_CHARS:
            m = _NUMBER_RE.match(source, start)
            assert m is not None
            text = m.group(0)
            try:
                value = float(text)
            except ValueError:
                raise make_error(
                    LexError, f"invalid number literal: {text!r}", source, start
                ) from None
            self.pos = m.end()
            return self._emit(Token(TokenKind.NUMBER, value, start))

        kind = _SINGLE_CHAR.get(c)
        if kind is None:
            raise make_error(LexError, f"unknown token: {c!r}", source, start)

        self.pos += 1
        return self._emit(Token(kind, c, start))

    def _emit(self, tok: Token) -> Token:
        # END is recorded once however often it is requested
        if not (self.tokens and self.tokens[-1].kind == TokenKind.END):
            self.tokens.append(tok)
        return tok


def tokenize(source: str) -> Iterator[Token]:
    """Yield every token of ``source``, ending with END."""
    lexer = Lexer(source)
    while True:
        tok = lexer.next_token()
        logger.debug("token %r", tok)
        yield tok
        if tok.kind == TokenKind.END:
            return
