"""Infix expression parsing and postfix evaluation.

    raw string -> tokenize -> to_postfix_tokens -> evaluate_postfix -> float
"""

from rpncalc.expression.converter import to_postfix_tokens
from rpncalc.expression.evaluator import evaluate_postfix
from rpncalc.expression.expression import Expression, evaluate, to_postfix, try_evaluate
from rpncalc.expression.result import EvaluationResult
from rpncalc.expression.stack import Stack, StackUnderflowError
from rpncalc.expression.tokenizer import split_expression, tokenize
from rpncalc.expression.tokens import OPERATORS, PRECEDENCE, Token, TokenKind

__all__ = [
    "Expression",
    "EvaluationResult",
    "OPERATORS",
    "PRECEDENCE",
    "Stack",
    "StackUnderflowError",
    "Token",
    "TokenKind",
    "evaluate",
    "evaluate_postfix",
    "split_expression",
    "to_postfix",
    "to_postfix_tokens",
    "tokenize",
    "try_evaluate",
]
