"""
reckon - a recursive-descent interpreter for arithmetic expressions.

Lexer, parser, and evaluator for floating-point arithmetic with
``+ - * /``, parentheses, and standard precedence.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import EvalError, LexError, ParseError, ReckonError
from .core.expression_lang import evaluate, parse_expr
from .core.pipeline import CalcResult, ErrorReport, calculate

__version__ = get_version()

__all__ = [
    "__version__",
    "CalcResult",
    "ErrorReport",
    "EvalError",
    "LexError",
    "ParseError",
    "ReckonError",
    "calculate",
    "evaluate",
    "parse_expr",
]
