"""Exception classes for the rpncalc application.

Every error carries a machine-readable ``code``, a human-readable
``message`` and an optional ``details`` dictionary so that callers (the MCP
server, the web server, library users) can map failures to structured
responses without parsing strings.
"""

from typing import Any, Dict, Optional


class RpnCalcError(Exception):
    """Base for all rpncalc errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(RpnCalcError):
    """Raised when a request or argument fails validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="VALIDATION_ERROR", message=message, details=details)


class ConfigurationError(RpnCalcError):
    """Raised when configuration values are missing or malformed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


class RegistryError(RpnCalcError):
    """Raised when a tool or capability lookup/registration fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="REGISTRY_ERROR", message=message, details=details)


class InvalidInputError(ValidationError):
    """Raised when tool arguments are missing or of the wrong type."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        RpnCalcError.__init__(self, code="INVALID_INPUT", message=message, details=details)


class ExpressionError(RpnCalcError):
    """Base for all expression parsing and evaluation errors."""
    pass


class InvalidTokenError(ExpressionError):
    """Raised when an expression contains a fragment that is not a number,
    an operator or a parenthesis."""

    def __init__(self, token: str, details: Optional[Dict[str, Any]] = None):
        merged = {"token": token}
        merged.update(details or {})
        super().__init__(
            code="INVALID_TOKEN",
            message=f"Invalid token: '{token}'",
            details=merged,
        )
        self.token = token


class MalformedExpressionError(ExpressionError):
    """Raised on unbalanced parentheses or operator/operand mismatches."""

    def __init__(self, message: str, reason: str, details: Optional[Dict[str, Any]] = None):
        merged = {"reason": reason}
        merged.update(details or {})
        super().__init__(code="MALFORMED_EXPRESSION", message=message, details=merged)
        self.reason = reason


class EmptyExpressionError(ExpressionError):
    """Raised when evaluating an empty or whitespace-only expression."""

    def __init__(self, message: str = "Expression is empty"):
        super().__init__(code="EMPTY_EXPRESSION", message=message)


class ExpressionTooLongError(ExpressionError):
    """Raised when an expression exceeds the configured length limit."""

    def __init__(self, length: int, limit: int):
        super().__init__(
            code="EXPRESSION_TOO_LONG",
            message=f"Expression length {length} exceeds limit of {limit} characters",
            details={"length": length, "limit": limit},
        )
