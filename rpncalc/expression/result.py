"""Tagged success/failure result for expression evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from rpncalc.exceptions import ExpressionError


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one expression.

    Exactly one of ``value`` (when ``ok``) or ``error_code`` (otherwise) is
    meaningful.
    """

    ok: bool
    value: Optional[float] = None
    error_code: Optional[str] = None
    message: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, value: float) -> "EvaluationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ExpressionError) -> "EvaluationResult":
        return cls(
            ok=False,
            error_code=error.code,
            message=error.message,
            details=dict(error.details),
        )
