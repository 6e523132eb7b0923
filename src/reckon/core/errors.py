"""
Error types for reckon lexing, parsing, and evaluation.
"""

from dataclasses import dataclass
from typing import Optional


class ReckonError(Exception):
    """Base exception for all reckon errors."""

    kind = "ReckonError"

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message} at column {self.context.column}"
        return self.message

    @property
    def pos(self) -> int | None:
        """0-based offset of the offending character, if known."""
        return self.context.pos if self.context else None


class LexError(ReckonError):
    """
    Raised when a character does not start any valid token.

    Examples:
    - Unknown characters such as ``@`` or ``x``
    - Malformed number literals such as ``1.2.3``
    """

    kind = "LexError"


class ParseError(ReckonError):
    """
    Raised when the token stream does not match the grammar.

    Examples:
    - Missing closing parenthesis
    - Operator with no left or right operand
    - Input ending mid-expression
    - Tokens left over after a complete expression
    """

    kind = "ParseError"


class EvalError(ReckonError):
    """
    Raised when the evaluator is handed something outside the AST.

    Trees built by the parser never trigger this.
    """

    kind = "EvalError"


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        source: The full expression text
        pos: 0-based offset into ``source``
    """

    source: str
    pos: int

    @property
    def column(self) -> int:
        """1-indexed column of the error."""
        return self.pos + 1

    def format(self) -> str:
        """
        Format the source line with a marker under the error position.

        Returns:
            Two lines, e.g.::

                2 + * 3
                    ^
        """
        # Tabs and newlines would shift the marker
        line = "".join(" " if c.isspace() else c for c in self.source)
        return f"{line}\n{' ' * self.pos}^"


def make_error(
    error_cls: type[ReckonError],
    message: str,
    source: str,
    pos: int,
) -> ReckonError:
    """
    Helper to create a reckon error with source context.

    Args:
        error_cls: LexError, ParseError or EvalError
        message: Error description
        source: Expression text
        pos: 0-based offset of the offending character

    Returns:
        Error instance with attached ErrorContext
    """
    return error_cls(message, ErrorContext(source=source, pos=pos))
