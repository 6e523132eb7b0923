"""Tests for the parse-then-evaluate pipeline."""

from __future__ import annotations

import logging
import math

import pytest

from reckon.core.expression_lang.parser import MAX_NESTING
from reckon.core.expression_lang.tokenizer import TokenKind
from reckon.core.ir.expressions import NumberLeaf
from reckon.core.pipeline import CalcResult, ErrorReport, calculate


class TestCalculateSuccess:
    """calculate() returns values for well-formed expressions."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("3 + 4 * 2", 11.0),
            ("(3 + 4) * 2", 14.0),
            ("10 / 2 / 5", 1.0),
            ("  1  +  2  ", 3.0),
            ("((2))", 2.0),
        ],
    )
    def test_values(self, source: str, expected: float) -> None:
        result = calculate(source)
        assert result.ok
        assert result.value == expected
        assert result.error is None
        assert result.source == source

    def test_division_by_zero_is_not_an_error(self) -> None:
        result = calculate("1 / 0")
        assert result.ok
        assert result.value == math.inf

    def test_nan_result(self) -> None:
        result = calculate("0 / 0")
        assert result.ok
        assert result.value is not None and math.isnan(result.value)

    def test_allow_trailing(self) -> None:
        result = calculate("2 + 3)", allow_trailing=True)
        assert result.ok
        assert result.value == 5.0

    def test_keeps_tree_and_tokens(self) -> None:
        result = calculate("2 3", allow_trailing=True)
        assert result.expr == NumberLeaf(value=2.0)
        # The parser stops after looking at the second number
        assert [t.kind for t in result.tokens] == [TokenKind.NUMBER, TokenKind.NUMBER]

    def test_long_chain(self) -> None:
        result = calculate(" + ".join(["1"] * 3000))
        assert result.ok
        assert result.value == 3000.0

    def test_nesting_at_limit(self) -> None:
        result = calculate("(" * MAX_NESTING + "4 / 2" + ")" * MAX_NESTING)
        assert result.ok
        assert result.value == 2.0


class TestCalculateErrors:
    """calculate() reports failures as values instead of raising."""

    def test_lex_error(self) -> None:
        result = calculate("1 @ 2")
        assert not result.ok
        assert result.value is None
        assert result.error == ErrorReport(kind="LexError", message="unknown token: '@'", pos=2)

    def test_parse_error_missing_paren(self) -> None:
        result = calculate("(1 + 2")
        assert result.error is not None
        assert result.error.kind == "ParseError"
        assert result.error.message.startswith("missing closing parenthesis")
        assert result.error.pos == 6

    def test_parse_error_unexpected_token(self) -> None:
        result = calculate("2 + * 3")
        assert result.error is not None
        assert result.error.kind == "ParseError"
        assert str(result.error) == "ParseError: unexpected token: '*'"

    def test_trailing_tokens_rejected_by_default(self) -> None:
        result = calculate("2 3")
        assert result.error is not None
        assert result.error.kind == "ParseError"

    def test_deep_nesting_is_an_error_value(self) -> None:
        result = calculate("(" * 400 + "1" + ")" * 400)
        assert result.error is not None
        assert result.error.kind == "ParseError"
        assert result.error.message.startswith("expression too deeply nested")
        assert result.error.pos == MAX_NESTING
        assert result.expr is None

    def test_each_call_is_independent(self) -> None:
        assert not calculate("1 +").ok
        assert calculate("1 + 1").value == 2.0

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="reckon.core.pipeline"):
            calculate("1 @ 2")
        assert "LexError" in caplog.text

    def test_result_is_frozen(self) -> None:
        from pydantic import ValidationError

        result = CalcResult(source="1", value=1.0)
        with pytest.raises(ValidationError):
            result.value = 2.0  # type: ignore[misc]
