"""
Parse-then-evaluate pipeline.

``calculate()`` is the entry point for callers that read expressions from a
user: every outcome, success or failure, comes back as a CalcResult value.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from reckon.core.errors import ReckonError
from reckon.core.expression_lang.evaluator import evaluate
from reckon.core.expression_lang.parser import Parser
from reckon.core.expression_lang.tokenizer import Lexer, Token
from reckon.core.ir.expressions import Expr

logger = logging.getLogger(__name__)


class ErrorReport(BaseModel):
    """A lexing, parsing or evaluation failure."""

    kind: str = Field(description="LexError, ParseError or EvalError")
    message: str
    pos: int | None = Field(default=None, description="0-based offset into the source")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class CalcResult(BaseModel):
    """Outcome of one expression: a value or an error, never both."""

    source: str
    value: float | None = None
    error: ErrorReport | None = None
    expr: Expr | None = Field(default=None, description="Parsed tree, on success")
    tokens: list[Token] = Field(
        default_factory=list, description="Tokens the lexer produced, in order"
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def ok(self) -> bool:
        return self.error is None


def calculate(source: str, *, allow_trailing: bool = False) -> CalcResult:
    """Parse and evaluate one expression.

    A fresh lexer and parser are built for each call, so a failed
    expression leaves nothing behind for the next one.

    Args:
        source: Expression text
        allow_trailing: Ignore tokens after the first complete expression

    Returns:
        CalcResult with ``value`` set on success, ``error`` on failure.
    """
    lexer = Lexer(source)
    try:
        expr = Parser(lexer, allow_trailing=allow_trailing).parse()
        value = evaluate(expr)
    except ReckonError as e:
        logger.debug("%s in %r: %s", e.kind, source, e.message)
        return CalcResult(
            source=source,
            error=ErrorReport(kind=e.kind, message=e.message, pos=e.pos),
            tokens=lexer.tokens,
        )
    return CalcResult(source=source, value=value, expr=expr, tokens=lexer.tokens)
