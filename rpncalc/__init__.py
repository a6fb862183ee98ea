"""rpncalc - infix arithmetic via shunting-yard and postfix evaluation."""

from rpncalc.expression import Expression, EvaluationResult, evaluate, to_postfix, try_evaluate

__version__ = "0.1.0"

__all__ = [
    "Expression",
    "EvaluationResult",
    "evaluate",
    "to_postfix",
    "try_evaluate",
]
