"""Math Engine - Facade for all mathematical capabilities.

This module provides a unified interface to all math capabilities.
For direct MCP tool handling, use the tool_registry instead.
"""

from __future__ import annotations

from typing import Dict, Optional

from rpncalc.logger import session_logger as logger
from rpncalc.math_engine.base import MathCapability, ToolResult
from rpncalc.math_engine.capabilities import ExpressionCapability


class MathEngine:
    """Unified interface to all math engine capabilities.

    This facade provides a simple API for direct programmatic use.
    For MCP tool handling, use the tool_registry module instead.
    """

    def __init__(self):
        """Initialize the math engine with all capabilities."""
        self._capabilities: Dict[str, MathCapability] = {}

        self._register_capability(ExpressionCapability())

        logger.info(
            "MathEngine initialized",
            capabilities=list(self._capabilities.keys()),
        )

    def _register_capability(self, capability: MathCapability) -> None:
        """Register a capability."""
        self._capabilities[capability.name] = capability

    def get_capability(self, name: str) -> Optional[MathCapability]:
        """Get a capability by name."""
        return self._capabilities.get(name)

    @property
    def expression(self) -> ExpressionCapability:
        """Get the expression capability for direct access."""
        cap = self._capabilities.get("expression")
        if cap is None:
            raise RuntimeError("ExpressionCapability not registered")
        return cap  # type: ignore

    def to_postfix(self, expression: str) -> ToolResult:
        """Convenience method for postfix conversion."""
        return self.expression.to_postfix(expression)

    def evaluate(self, expression: str) -> ToolResult:
        """Convenience method for expression evaluation."""
        return self.expression.evaluate(expression)

    def list_capabilities(self) -> Dict[str, str]:
        """List all registered capabilities."""
        return {
            name: cap.description
            for name, cap in self._capabilities.items()
        }


# Module-level singleton for convenience
_engine: Optional[MathEngine] = None


def get_engine() -> MathEngine:
    """Get or create the singleton MathEngine instance."""
    global _engine
    if _engine is None:
        _engine = MathEngine()
    return _engine
