"""
reckon arithmetic expression language.

Tokenizer, parser, and evaluator for floating-point arithmetic with
``+ - * /`` and parentheses.

Usage:
    from reckon.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("(3 + 4) * 2")
    result = evaluate(expr)
    # result == 14.0
"""

from reckon.core.expression_lang.evaluator import evaluate
from reckon.core.expression_lang.parser import Parser, parse_expr
from reckon.core.expression_lang.tokenizer import Lexer, Token, TokenKind, tokenize

__all__ = ["Lexer", "Parser", "Token", "TokenKind", "evaluate", "parse_expr", "tokenize"]
