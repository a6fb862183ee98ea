"""Split raw infix strings into tokens.

Operators and parentheses are isolated by surrounding them with spaces and
splitting on whitespace, so every maximal run of other characters becomes a
single fragment. A "-" that cannot be a binary operator (start of input,
after "(" or after another operator) is folded into the number that
directly follows it.
"""

from __future__ import annotations

import re
from typing import List

from rpncalc.config import Config
from rpncalc.exceptions import ExpressionTooLongError, InvalidTokenError
from rpncalc.expression.tokens import OPERATORS, Token, classify, is_number

OPERATORS_PATTERN = re.compile(r"([+\-*/^()])")

_PREFIX_POSITIONS = OPERATORS | {"("}


def _check_length(expression: str) -> None:
    limit = Config.get_max_expression_length()
    if len(expression) > limit:
        raise ExpressionTooLongError(len(expression), limit)


def _merge_signed_literals(fragments: List[str]) -> List[str]:
    merged: List[str] = []
    i = 0
    while i < len(fragments):
        fragment = fragments[i]
        at_prefix = not merged or merged[-1] in _PREFIX_POSITIONS
        if (
            fragment == "-"
            and at_prefix
            and i + 1 < len(fragments)
            and is_number(fragments[i + 1])
        ):
            merged.append("-" + fragments[i + 1])
            i += 2
            continue
        merged.append(fragment)
        i += 1
    return merged


def split_expression(expression: str) -> List[str]:
    """Return the non-empty string fragments of an infix expression."""
    _check_length(expression)
    spaced = OPERATORS_PATTERN.sub(r" \1 ", expression)
    return _merge_signed_literals(spaced.split())


def tokenize(expression: str) -> List[Token]:
    """Return the classified tokens of an infix expression.

    Raises:
        InvalidTokenError: if a fragment is not a number, an operator or a
            parenthesis.
        ExpressionTooLongError: if the input exceeds the configured limit.
    """
    tokens = []
    for position, fragment in enumerate(split_expression(expression)):
        token = classify(fragment)
        if token is None:
            raise InvalidTokenError(fragment, details={"position": position})
        tokens.append(token)
    return tokens
