"""Token types for infix and postfix expressions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


# Higher binds tighter. Equal precedence resolves left-to-right, so every
# operator, including "^", is left-associative.
PRECEDENCE: Dict[str, int] = {
    "^": 3,
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
}

OPERATORS = frozenset(PRECEDENCE)

NUMBER_PATTERN = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


@dataclass(frozen=True)
class Token:
    """A single lexical element of an expression."""

    kind: TokenKind
    text: str
    value: Optional[float] = None

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    @property
    def precedence(self) -> int:
        """Binding strength of an operator token; 0 for anything else."""
        return PRECEDENCE.get(self.text, 0) if self.is_operator else 0

    def __str__(self) -> str:
        return self.text


def is_number(text: str) -> bool:
    return NUMBER_PATTERN.fullmatch(text) is not None


def classify(text: str) -> Optional[Token]:
    """Build a Token from a fragment, or None if it is not recognized."""
    if is_number(text):
        return Token(TokenKind.NUMBER, text, float(text))
    if text in OPERATORS:
        return Token(TokenKind.OPERATOR, text)
    if text == "(":
        return Token(TokenKind.LEFT_PAREN, text)
    if text == ")":
        return Token(TokenKind.RIGHT_PAREN, text)
    return None
