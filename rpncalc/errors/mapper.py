"""Error response mapping for MCP and web interfaces.

Turns exceptions into an ErrorResponse whose recovery hint tells the caller
how to fix the expression. Malformed expressions get a hint chosen by the
``reason`` in their details.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import ValidationError as PydanticValidationError

from rpncalc.exceptions import (
    ConfigurationError,
    RegistryError,
    RpnCalcError,
    ValidationError,
)


@dataclass
class ErrorResponse:
    """Structured error response for API consumers."""

    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    recovery_strategy: Optional[str] = None


DEFAULT_RECOVERY = "Review the error message, adjust the request, and try again."

RECOVERY_STRATEGIES: Dict[str, str] = {
    "REGISTRY_ERROR": "Call list_tools and use one of the advertised tool names.",
    "VALIDATION_ERROR": "Review the error message and adjust the request parameters accordingly.",
    "PYDANTIC_VALIDATION_ERROR": "Send a JSON object with a single string field 'expression'.",
    "CONFIGURATION_ERROR": "Check the RPNCALC_* environment variables and restart the service.",
    "INVALID_INPUT": "The 'expression' argument must be a string.",
    "INVALID_TOKEN": "Use only digits, '.', the operators + - * / ^ and parentheses.",
    "MALFORMED_EXPRESSION": "Check that parentheses are balanced and every operator has two operands.",
    "EMPTY_EXPRESSION": "Provide a non-empty expression such as '1+2'.",
    "EXPRESSION_TOO_LONG": "Shorten the expression or split it into smaller parts.",
    "INTERNAL_ERROR": "An unexpected error occurred. Please report this issue if it persists.",
}

MALFORMED_RECOVERY: Dict[str, str] = {
    "unbalanced_parentheses": "Balance the parentheses: close every '(' and drop any unmatched ')'.",
    "empty_group": "Put an expression inside every pair of parentheses, e.g. '(1+2)'.",
    "operand_underflow": "Give every operator a number on both sides, e.g. '3*2' rather than '3*'.",
    "leftover_operands": "Join every pair of adjacent numbers with an operator, e.g. '2*3' rather than '2 3'.",
}

# First match wins, so subclasses must precede their bases
HTTP_STATUS: List[Tuple[Type[Exception], int]] = [
    (RegistryError, 404),
    (ValidationError, 422),
    (PydanticValidationError, 422),
    (ConfigurationError, 500),
    (RpnCalcError, 400),
]


def get_recovery_strategy(error_code: str, reason: Optional[str] = None) -> str:
    """Return the recovery hint for an error code, refined by reason if known."""
    if reason is not None and error_code == "MALFORMED_EXPRESSION":
        hint = MALFORMED_RECOVERY.get(reason)
        if hint is not None:
            return hint
    return RECOVERY_STRATEGIES.get(error_code, DEFAULT_RECOVERY)


def map_exception_to_response(error: Exception) -> ErrorResponse:
    """Convert an exception to a structured ErrorResponse."""
    if isinstance(error, RpnCalcError):
        details = error.details or None
        reason = details.get("reason") if details else None
        return ErrorResponse(
            error_code=error.code,
            message=error.message,
            details=details,
            recovery_strategy=get_recovery_strategy(error.code, reason),
        )

    if isinstance(error, PydanticValidationError):
        errors = error.errors(include_url=False)
        return ErrorResponse(
            error_code="PYDANTIC_VALIDATION_ERROR",
            message=f"Validation failed: {len(errors)} error(s)",
            details={"errors": [
                {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
                for e in errors
            ]},
            recovery_strategy=get_recovery_strategy("PYDANTIC_VALIDATION_ERROR"),
        )

    return ErrorResponse(
        error_code="INTERNAL_ERROR",
        message=str(error),
        details={"exception_type": type(error).__name__},
        recovery_strategy=get_recovery_strategy("INTERNAL_ERROR"),
    )


def map_error_for_mcp(error: Exception) -> Dict[str, Any]:
    """Map exception to MCP tool response format."""
    response = map_exception_to_response(error)

    return {
        "status": "error",
        "error_code": response.error_code,
        "message": response.message,
        "details": response.details,
        "recovery_strategy": response.recovery_strategy,
    }


def map_error_for_web(error: Exception) -> Dict[str, Any]:
    """Map exception to web API response format."""
    response = map_exception_to_response(error)

    return {
        "status": "error",
        "error": {
            "code": response.error_code,
            "message": response.message,
            "details": response.details,
            "recovery": response.recovery_strategy,
        },
    }


def get_http_status_for_error(error: Exception) -> int:
    for error_type, status in HTTP_STATUS:
        if isinstance(error, error_type):
            return status
    return 500
