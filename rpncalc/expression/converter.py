"""Infix to postfix conversion using the shunting-yard algorithm."""

from __future__ import annotations

from typing import Iterable, List, Optional

from rpncalc.exceptions import MalformedExpressionError
from rpncalc.expression.stack import Stack
from rpncalc.expression.tokens import Token, TokenKind
from rpncalc.logger import session_logger as logger


def _unbalanced(message: str, position: int) -> MalformedExpressionError:
    return MalformedExpressionError(
        message,
        reason="unbalanced_parentheses",
        details={"position": position},
    )


def to_postfix_tokens(tokens: Iterable[Token]) -> List[Token]:
    """Reorder infix tokens into postfix order.

    An operator on the stack is emitted before an incoming operator whose
    precedence is lower than or equal to its own, which makes operators of
    equal precedence (including "^") left-associative.

    Raises:
        MalformedExpressionError: on a ")" without a matching "(", a "("
            that is never closed, or an empty "()" group.
    """
    operators: Stack[Token] = Stack()
    output: List[Token] = []
    previous: Optional[Token] = None

    for position, token in enumerate(tokens):
        if token.kind is TokenKind.NUMBER:
            output.append(token)

        elif token.kind is TokenKind.LEFT_PAREN:
            operators.push(token)

        elif token.kind is TokenKind.RIGHT_PAREN:
            if previous is not None and previous.kind is TokenKind.LEFT_PAREN:
                raise MalformedExpressionError(
                    "Empty parentheses in expression",
                    reason="empty_group",
                    details={"position": position},
                )
            while True:
                if operators.is_empty():
                    raise _unbalanced("Unmatched ')' in expression", position)
                top = operators.pop()
                if top.kind is TokenKind.LEFT_PAREN:
                    break
                output.append(top)

        else:
            while (
                not operators.is_empty()
                and operators.peek().is_operator
                and token.precedence <= operators.peek().precedence
            ):
                output.append(operators.pop())
            operators.push(token)

        previous = token

    while not operators.is_empty():
        top = operators.pop()
        if top.kind is TokenKind.LEFT_PAREN:
            raise _unbalanced("Unclosed '(' in expression", len(output))
        output.append(top)

    logger.debug("Converted to postfix", postfix=" ".join(t.text for t in output))
    return output
