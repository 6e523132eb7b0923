"""
reckon intermediate representation: the expression AST.
"""

from .expressions import BinaryOp, Expr, NumberLeaf, Operator, depth, node_count, render

__all__ = [
    "BinaryOp",
    "Expr",
    "NumberLeaf",
    "Operator",
    "depth",
    "node_count",
    "render",
]
