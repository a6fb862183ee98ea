"""Tests for shunting-yard conversion."""

import pytest

from rpncalc.exceptions import MalformedExpressionError
from rpncalc.expression.converter import to_postfix_tokens
from rpncalc.expression.tokenizer import tokenize


def postfix(expression: str) -> str:
    return " ".join(t.text for t in to_postfix_tokens(tokenize(expression)))


class TestToPostfixTokens:
    def test_single_number(self):
        assert postfix("42") == "42"

    def test_multiplication_before_addition(self):
        assert postfix("3+4*2") == "3 4 2 * +"

    def test_parentheses_override_precedence(self):
        assert postfix("(3+4)*2") == "3 4 + 2 *"

    def test_equal_precedence_is_left_to_right(self):
        assert postfix("10/2-3") == "10 2 / 3 -"
        assert postfix("1-2+3") == "1 2 - 3 +"

    def test_power_is_left_associative(self):
        assert postfix("2^3^2") == "2 3 ^ 2 ^"

    def test_power_binds_tighter_than_multiplication(self):
        assert postfix("2*3^2") == "2 3 2 ^ *"

    def test_nested_parentheses(self):
        assert postfix("((1+2)*(3-4))/5") == "1 2 + 3 4 - * 5 /"

    def test_parentheses_are_dropped(self):
        tokens = to_postfix_tokens(tokenize("(1)"))
        assert [t.text for t in tokens] == ["1"]

    def test_signed_literals_pass_through(self):
        assert postfix("-5+3") == "-5 3 +"

    def test_empty(self):
        assert to_postfix_tokens([]) == []

    def test_unmatched_right_paren(self):
        with pytest.raises(MalformedExpressionError) as exc_info:
            postfix("1+2)")
        assert exc_info.value.reason == "unbalanced_parentheses"

    def test_unclosed_left_paren(self):
        with pytest.raises(MalformedExpressionError) as exc_info:
            postfix("(1+2")
        assert exc_info.value.reason == "unbalanced_parentheses"

    @pytest.mark.parametrize("expression,position", [("()", 1), ("(())", 2), ("2*()", 3)])
    def test_empty_group(self, expression, position):
        with pytest.raises(MalformedExpressionError) as exc_info:
            postfix(expression)
        assert exc_info.value.reason == "empty_group"
        assert exc_info.value.details["position"] == position

    def test_operators_without_operands_still_convert(self):
        """Structure errors other than parentheses surface at evaluation."""
        assert postfix("+") == "+"
