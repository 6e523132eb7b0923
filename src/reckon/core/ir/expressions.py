"""
Expression AST for reckon.

A closed set of two node types:
- NumberLeaf: a floating-point literal
- BinaryOp: left op right, op one of + - * /

Nodes are frozen pydantic models. A parent holds its children directly;
nothing in a tree is shared or mutated after construction.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Arithmetic operator tags carried by BinaryOp."""

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberLeaf(BaseModel):
    """A number literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


class BinaryOp(BaseModel):
    """Binary operation: left op right."""

    op: Operator
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NumberLeaf | BinaryOp

# Rebuild models for recursive forward references
BinaryOp.model_rebuild()


def node_count(expr: Expr) -> int:
    """Total number of nodes in the tree."""
    count = 0
    stack: list[Expr] = [expr]
    while stack:
        node = stack.pop()
        count += 1
        if isinstance(node, BinaryOp):
            stack.append(node.left)
            stack.append(node.right)
    return count


def depth(expr: Expr) -> int:
    """Height of the tree; a lone leaf has depth 1."""
    deepest = 0
    stack: list[tuple[Expr, int]] = [(expr, 1)]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        if isinstance(node, BinaryOp):
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return deepest


def render(expr: Expr) -> str:
    """Fully parenthesized text of the tree, e.g. ``((3.0 + 4.0) * 2.0)``."""
    parts: list[str] = []
    # Explicit stack; left-folded chains are as deep as they are long
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, BinaryOp):
            stack.extend([")", item.right, f" {item.op.value} ", item.left, "("])
        else:
            parts.append(repr(item.value))
    return "".join(parts)
