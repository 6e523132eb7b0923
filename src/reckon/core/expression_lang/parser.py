"""
Recursive descent parser for reckon arithmetic expressions.

Grammar (precedence low to high):
    expr    → term (("+"|"-") term)*
    term    → factor (("*"|"/") factor)*
    factor  → NUMBER | "(" expr ")"

Both binary levels fold to the left, so ``10 / 2 / 5`` is ``(10 / 2) / 5``.
The parser keeps exactly one token of lookahead.
"""

from __future__ import annotations

import logging

from reckon.core.errors import ParseError, make_error
from reckon.core.expression_lang.tokenizer import Lexer, Token, TokenKind
from reckon.core.ir.expressions import BinaryOp, Expr, NumberLeaf, Operator, depth, node_count

logger = logging.getLogger(__name__)

_ADDITIVE: dict[TokenKind, Operator] = {
    TokenKind.PLUS: Operator.PLUS,
    TokenKind.MINUS: Operator.MINUS,
}

_MULTIPLICATIVE: dict[TokenKind, Operator] = {
    TokenKind.MULTIPLY: Operator.MULTIPLY,
    TokenKind.DIVIDE: Operator.DIVIDE,
}

# Each parenthesis level costs three stack frames (factor, expr, term)
MAX_NESTING = 200


class Parser:
    """Recursive descent parser pulling tokens from a Lexer.

    The first token is fetched on construction, so a LexError can surface
    here. ``parse()`` is meant to be called once; after any error the
    parser and its lexer should be discarded.
    """

    def __init__(self, lexer: Lexer, *, allow_trailing: bool = False) -> None:
        self.lexer = lexer
        self.allow_trailing = allow_trailing
        self.nesting = 0
        self.current: Token = lexer.next_token()

    def advance(self) -> Token:
        tok = self.current
        self.current = self.lexer.next_token()
        return tok

    def _error(self, message: str) -> ParseError:
        tok = self.current
        detail = "end of input" if tok.kind == TokenKind.END else repr(tok.value)
        return make_error(ParseError, f"{message}: {detail}", self.lexer.source, tok.pos)

    def parse(self) -> Expr:
        """Parse the whole input into an AST.

        Raises:
            ParseError: If the tokens do not form an expression, or tokens
                remain after it (unless ``allow_trailing`` is set).
            LexError: If the lexer hits an invalid character.
        """
        try:
            expr = self.parse_expr()
        except RecursionError:
            # Callers already deep in the stack can run out below MAX_NESTING
            raise self._error("expression too deeply nested") from None

        if self.current.kind != TokenKind.END and not self.allow_trailing:
            raise self._error("unexpected token after expression")

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "parsed %r: %d nodes, depth %d", self.lexer.source, node_count(expr), depth(expr)
            )
        return expr

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while self.current.kind in _ADDITIVE:
            op = _ADDITIVE[self.advance().kind]
            right = self.parse_term()
            left = BinaryOp(op=op, left=left, right=right)
        return left

    def parse_term(self) -> Expr:
        """factor (('*' | '/') factor)*"""
        left = self.parse_factor()
        while self.current.kind in _MULTIPLICATIVE:
            op = _MULTIPLICATIVE[self.advance().kind]
            right = self.parse_factor()
            left = BinaryOp(op=op, left=left, right=right)
        return left

    def parse_factor(self) -> Expr:
        """NUMBER | '(' expr ')'"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return NumberLeaf(value=tok.value)

        if tok.kind == TokenKind.LEFT_PAREN:
            if self.nesting >= MAX_NESTING:
                raise self._error("expression too deeply nested")
            self.nesting += 1
            self.advance()
            expr = self.parse_expr()
            if self.current.kind != TokenKind.RIGHT_PAREN:
                raise self._error("missing closing parenthesis")
            self.advance()
            self.nesting -= 1
            return expr

        raise self._error("unexpected token")


def parse_expr(source: str, *, allow_trailing: bool = False) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "(3 + 4) * 2")
        allow_trailing: Stop after the first complete expression instead of
            rejecting leftover tokens.

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the expression is invalid.
        LexError: If tokenization fails.
    """
    return Parser(Lexer(source), allow_trailing=allow_trailing).parse()
