"""Public entry points: infix text in, postfix text or a number out."""

from __future__ import annotations

from typing import List, Optional

from rpncalc.exceptions import EmptyExpressionError, ExpressionError
from rpncalc.expression.converter import to_postfix_tokens
from rpncalc.expression.evaluator import evaluate_postfix
from rpncalc.expression.result import EvaluationResult
from rpncalc.expression.tokenizer import tokenize
from rpncalc.expression.tokens import Token


class Expression:
    """An infix expression with lazily computed token and postfix forms."""

    def __init__(self, expression: str):
        self.expression = expression
        self._tokens: Optional[List[Token]] = None
        self._postfix_tokens: Optional[List[Token]] = None

    def __repr__(self) -> str:
        return f"Expression({self.expression!r})"

    @property
    def tokens(self) -> List[Token]:
        if self._tokens is None:
            self._tokens = tokenize(self.expression)
        return list(self._tokens)

    @property
    def postfix_tokens(self) -> List[Token]:
        if self._postfix_tokens is None:
            self._postfix_tokens = to_postfix_tokens(self.tokens)
        return list(self._postfix_tokens)

    def is_empty(self) -> bool:
        return not self.expression.strip()

    def to_postfix(self) -> str:
        """Space-joined postfix form; empty string for empty input."""
        if self.is_empty():
            return ""
        return " ".join(token.text for token in self.postfix_tokens)

    def evaluate(self) -> float:
        if self.is_empty():
            raise EmptyExpressionError()
        return evaluate_postfix(self.postfix_tokens)


def to_postfix(expression: str) -> str:
    """Convert an infix expression to space-joined postfix notation.

    >>> to_postfix("3+4*2")
    '3 4 2 * +'
    """
    return Expression(expression).to_postfix()


def evaluate(expression: str) -> float:
    """Evaluate an infix expression.

    Raises:
        EmptyExpressionError: for empty or whitespace-only input.
        InvalidTokenError: for characters outside the expression grammar.
        MalformedExpressionError: for unbalanced parentheses or missing
            operands.
    """
    return Expression(expression).evaluate()


def try_evaluate(expression: str) -> EvaluationResult:
    """Evaluate an infix expression without raising ExpressionError."""
    try:
        return EvaluationResult.success(evaluate(expression))
    except ExpressionError as e:
        return EvaluationResult.failure(e)
