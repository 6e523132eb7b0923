"""
Expression evaluator for reckon.

Walks the AST and reduces it to a float. Pure evaluation: no I/O, no
state between calls, and no use of Python's eval().
"""

from __future__ import annotations

import logging
import math
from typing import Any

from reckon.core.errors import EvalError
from reckon.core.ir.expressions import BinaryOp, Expr, NumberLeaf, Operator

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    Division by zero follows IEEE-754 and yields ``inf``, ``-inf`` or
    ``nan`` rather than raising.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value.

    Raises:
        EvalError: If ``expr`` contains something other than AST nodes.
    """
    result = _interpret(expr)
    logger.debug("evaluated %s = %r", expr, result)
    return result


def _interpret(expr: Any) -> float:
    """Reduce the tree bottom-up from an explicit stack.

    Left-folded chains such as ``1 + 1 + ... + 1`` are as deep as they are
    long, so the walk must not use Python recursion.
    """
    values: list[float] = []
    # (node, children_done); left is pushed last so it is evaluated first
    stack: list[tuple[Any, bool]] = [(expr, False)]
    while stack:
        node, children_done = stack.pop()

        if isinstance(node, NumberLeaf):
            values.append(node.value)
            continue

        if not isinstance(node, BinaryOp):
            raise EvalError(f"unknown node: {type(node).__name__}")

        if children_done:
            right = values.pop()
            left = values.pop()
            values.append(_apply(node.op, left, right))
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))

    return values.pop()


def _apply(op: Operator, left: float, right: float) -> float:
    """Apply one arithmetic operator."""
    if op == Operator.PLUS:
        return left + right
    if op == Operator.MINUS:
        return left - right
    if op == Operator.MULTIPLY:
        return left * right
    if op == Operator.DIVIDE:
        return _divide(left, right)

    raise EvalError(f"unknown operator: {op!r}")


def _divide(left: float, right: float) -> float:
    """IEEE-754 division; Python's ``/`` raises on a zero divisor."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    # Sign of the result is the product of the operand signs, -0.0 included
    return math.copysign(math.inf, left) * math.copysign(1.0, right)
