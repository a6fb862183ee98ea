"""Math Engine - capability-based access to expression evaluation.

Capabilities declare tools and handle their invocation; the MathEngine
facade gives direct programmatic access to all of them.
"""

from rpncalc.math_engine.base import MathCapability, ResultKind, ToolDefinition, ToolResult
from rpncalc.math_engine.engine import MathEngine, get_engine

__all__ = [
    "MathCapability",
    "ResultKind",
    "ToolResult",
    "ToolDefinition",
    "MathEngine",
    "get_engine",
]
