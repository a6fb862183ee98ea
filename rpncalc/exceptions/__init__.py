"""Custom exceptions for the rpncalc application.

All exceptions carry a code, a message and optional details, designed so
that both humans and LLM clients can decide how to recover.
"""

from rpncalc.exceptions.base import (
    RpnCalcError,
    ValidationError,
    ConfigurationError,
    RegistryError,
    InvalidInputError,
    ExpressionError,
    InvalidTokenError,
    MalformedExpressionError,
    EmptyExpressionError,
    ExpressionTooLongError,
)

__all__ = [
    # Base exceptions
    "RpnCalcError",
    "ValidationError",
    "ConfigurationError",
    "RegistryError",
    "InvalidInputError",
    # Expression exceptions
    "ExpressionError",
    "InvalidTokenError",
    "MalformedExpressionError",
    "EmptyExpressionError",
    "ExpressionTooLongError",
]
