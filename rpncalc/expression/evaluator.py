"""Evaluation of postfix (Reverse Polish) token sequences.

Arithmetic is carried out on numpy.float64 so that division by zero and
overflow follow IEEE-754 (inf, -inf, nan) instead of raising.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Union

import numpy as np

from rpncalc.exceptions import (
    EmptyExpressionError,
    InvalidTokenError,
    MalformedExpressionError,
)
from rpncalc.expression.stack import Stack
from rpncalc.expression.tokens import Token, TokenKind, classify
from rpncalc.logger import session_logger as logger

PostfixInput = Union[str, Sequence[Union[Token, str]]]

BINARY_OPS: Dict[str, Callable[[np.float64, np.float64], np.float64]] = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
}


def _as_tokens(postfix: PostfixInput) -> List[Token]:
    fragments = postfix.split() if isinstance(postfix, str) else postfix

    tokens = []
    for position, item in enumerate(fragments):
        if isinstance(item, Token):
            tokens.append(item)
            continue
        token = classify(item)
        if token is None:
            raise InvalidTokenError(item, details={"position": position})
        tokens.append(token)
    return tokens


def apply_operator(operator: str, operand1: np.float64, operand2: np.float64) -> np.float64:
    """Compute ``operand1 <operator> operand2``."""
    op_func = BINARY_OPS.get(operator)
    if op_func is None:
        raise InvalidTokenError(operator)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np.float64(op_func(operand1, operand2))


def evaluate_postfix(postfix: PostfixInput) -> float:
    """Evaluate a postfix expression and return its value.

    Args:
        postfix: space-joined postfix text, or a sequence of tokens or
            token strings

    Raises:
        EmptyExpressionError: if there are no tokens.
        InvalidTokenError: if a token is neither a number nor an operator.
        MalformedExpressionError: if an operator lacks operands or more than
            one value is left over.
    """
    tokens = _as_tokens(postfix)
    if not tokens:
        raise EmptyExpressionError()

    operands: Stack[np.float64] = Stack()

    for position, token in enumerate(tokens):
        if token.kind is TokenKind.NUMBER:
            operands.push(np.float64(token.value))
            continue

        if token.kind is not TokenKind.OPERATOR:
            raise InvalidTokenError(token.text, details={"position": position})

        if len(operands) < 2:
            raise MalformedExpressionError(
                f"Operator '{token.text}' is missing an operand",
                reason="operand_underflow",
                details={"position": position, "operator": token.text},
            )
        operand2 = operands.pop()
        operand1 = operands.pop()
        operands.push(apply_operator(token.text, operand1, operand2))

    if len(operands) != 1:
        raise MalformedExpressionError(
            f"Expression leaves {len(operands)} values instead of one",
            reason="leftover_operands",
            details={"count": len(operands)},
        )

    result = float(operands.pop())
    logger.debug("Evaluated postfix", tokens=len(tokens), result=result)
    return result
