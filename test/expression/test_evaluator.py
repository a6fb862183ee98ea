"""Tests for postfix evaluation."""

import math

import pytest

from rpncalc.exceptions import (
    EmptyExpressionError,
    InvalidTokenError,
    MalformedExpressionError,
)
from rpncalc.expression.evaluator import apply_operator, evaluate_postfix
from rpncalc.expression.tokens import Token, TokenKind


class TestEvaluatePostfix:
    def test_string_input(self):
        assert evaluate_postfix("3 4 2 * +") == 11.0

    def test_list_of_strings(self):
        assert evaluate_postfix(["3", "4", "+", "2", "*"]) == 14.0

    def test_token_input(self):
        tokens = [
            Token(TokenKind.NUMBER, "6", 6.0),
            Token(TokenKind.NUMBER, "3", 3.0),
            Token(TokenKind.OPERATOR, "/"),
        ]
        assert evaluate_postfix(tokens) == 2.0

    def test_operand_order(self):
        """The first popped value is the right-hand operand."""
        assert evaluate_postfix("10 4 -") == 6.0
        assert evaluate_postfix("8 2 /") == 4.0

    def test_power(self):
        assert evaluate_postfix("2 10 ^") == 1024.0

    def test_negative_literal(self):
        assert evaluate_postfix("-5 3 +") == -2.0

    def test_result_is_builtin_float(self):
        assert type(evaluate_postfix("1 2 +")) is float

    def test_division_by_zero_is_infinite(self):
        assert evaluate_postfix("1 0 /") == math.inf
        assert evaluate_postfix("-1 0 /") == -math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(evaluate_postfix("0 0 /"))

    def test_overflow_is_infinite(self):
        assert evaluate_postfix("10 400 ^") == math.inf

    def test_empty_raises(self):
        with pytest.raises(EmptyExpressionError):
            evaluate_postfix("")

    def test_lone_operator_underflows(self):
        with pytest.raises(MalformedExpressionError) as exc_info:
            evaluate_postfix("+")
        assert exc_info.value.reason == "operand_underflow"
        assert exc_info.value.details["operator"] == "+"

    def test_too_many_operands(self):
        with pytest.raises(MalformedExpressionError) as exc_info:
            evaluate_postfix("1 2 3 +")
        assert exc_info.value.reason == "leftover_operands"
        assert exc_info.value.details == {"reason": "leftover_operands", "count": 2}

    def test_leftover_details_stay_json_safe(self):
        """Leftover values may be infinite, so only their count is reported."""
        with pytest.raises(MalformedExpressionError) as exc_info:
            evaluate_postfix("2 1 0 /")
        assert exc_info.value.details == {"reason": "leftover_operands", "count": 2}

    def test_unknown_token(self):
        with pytest.raises(InvalidTokenError):
            evaluate_postfix("1 2 %")

    def test_parenthesis_is_not_evaluable(self):
        with pytest.raises(InvalidTokenError):
            evaluate_postfix(["1", "(", "+"])


class TestApplyOperator:
    @pytest.mark.parametrize("operator,expected", [
        ("+", 8.0),
        ("-", 4.0),
        ("*", 12.0),
        ("/", 3.0),
        ("^", 36.0),
    ])
    def test_operators(self, operator, expected):
        assert apply_operator(operator, 6.0, 2.0) == expected

    def test_unknown_operator(self):
        with pytest.raises(InvalidTokenError):
            apply_operator("%", 1.0, 2.0)
