"""Infix Expression Capability.

Exposes infix-to-postfix conversion and expression evaluation as tools.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Union

from rpncalc.exceptions import InvalidInputError
from rpncalc.expression import Expression, PRECEDENCE
from rpncalc.logger import session_logger as logger
from rpncalc.logger.decorators import log_execution_time
from rpncalc.math_engine.base import MathCapability, ResultKind, ToolDefinition, ToolResult

_EXPRESSION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "expression": {
            "type": "string",
            "description": "Infix arithmetic expression, e.g. '(3+4)*2'. "
                           "Supports + - * / ^, parentheses and decimal numbers.",
        },
    },
    "required": ["expression"],
}


def _json_number(value: float) -> Union[float, str]:
    """JSON has no inf/nan literals; non-finite values are sent as strings."""
    if math.isfinite(value):
        return value
    return str(value)


class ExpressionCapability(MathCapability):
    """Shunting-yard conversion and postfix evaluation of infix expressions."""

    @property
    def name(self) -> str:
        return "expression"

    @property
    def description(self) -> str:
        return "Infix arithmetic expressions: postfix conversion and evaluation"

    def get_tools(self) -> List[ToolDefinition]:
        return [
            ToolDefinition(
                name="expr_to_postfix",
                description="Convert an infix arithmetic expression to postfix (Reverse Polish) notation.",
                input_schema=_EXPRESSION_SCHEMA,
            ),
            ToolDefinition(
                name="expr_evaluate",
                description="Evaluate an infix arithmetic expression (+ - * / ^ and parentheses).",
                input_schema=_EXPRESSION_SCHEMA,
            ),
            ToolDefinition(
                name="expr_list_operators",
                description="List supported operators with their precedence.",
                input_schema={
                    "type": "object",
                    "properties": {},
                },
            ),
        ]

    def __init__(self):
        logger.info("ExpressionCapability initialized")

    @log_execution_time
    def handle(self, tool_name: str, arguments: Dict[str, Any]) -> ToolResult:
        """Route tool invocation to appropriate handler."""
        if tool_name == "expr_to_postfix":
            return self.to_postfix(self._expression_argument(arguments))
        elif tool_name == "expr_evaluate":
            return self.evaluate(self._expression_argument(arguments))
        elif tool_name == "expr_list_operators":
            return ToolResult(ResultKind.OPERATORS, self.list_operators())
        else:
            raise InvalidInputError(f"Unknown tool: {tool_name}")

    def _expression_argument(self, arguments: Dict[str, Any]) -> str:
        expression = arguments.get("expression")
        if expression is None:
            raise InvalidInputError("Missing required argument: expression")
        if not isinstance(expression, str):
            raise InvalidInputError(
                f"Argument 'expression' must be a string, got {type(expression).__name__}"
            )
        return expression

    def to_postfix(self, expression: str) -> ToolResult:
        """Convert an infix expression to space-joined postfix text."""
        return ToolResult(ResultKind.POSTFIX, Expression(expression).to_postfix())

    def evaluate(self, expression: str) -> ToolResult:
        """Evaluate an infix expression to a float64 scalar."""
        value = Expression(expression).evaluate()

        logger.debug("Expression evaluated", expression=expression, result=value)

        return ToolResult(ResultKind.VALUE, _json_number(value))

    def list_operators(self) -> Dict[str, Dict[str, Any]]:
        return {
            symbol: {"precedence": precedence, "associativity": "left"}
            for symbol, precedence in PRECEDENCE.items()
        }
