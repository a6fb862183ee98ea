"""Tool routing for the MCP server.

Each registered capability contributes its tools to one route table keyed
by tool name. Tool names are global: two capabilities may not share one.
"""

from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Optional

from mcp.types import Tool

from rpncalc.exceptions import RegistryError
from rpncalc.logger import session_logger as logger
from rpncalc.math_engine.base import MathCapability, ToolDefinition, ToolResult


class _Route(NamedTuple):
    capability: MathCapability
    tool: ToolDefinition


class ToolRegistry:
    """Maps MCP tool names to the capability that serves them."""

    def __init__(self):
        self._capabilities: Dict[str, MathCapability] = {}
        self._routes: Dict[str, _Route] = {}

    def register_capability(self, capability: MathCapability) -> None:
        """Add a capability and route its tools to it.

        Nothing is registered if the capability name or any of its tool
        names is already taken.

        Raises:
            RegistryError: on a duplicate capability or tool name
        """
        if capability.name in self._capabilities:
            raise RegistryError(
                f"Capability '{capability.name}' already registered",
                details={"capability": capability.name},
            )

        tools = capability.get_tools()
        for tool in tools:
            route = self._routes.get(tool.name)
            if route is not None:
                raise RegistryError(
                    f"Tool '{tool.name}' already registered by capability '{route.capability.name}'",
                    details={"tool": tool.name, "capability": route.capability.name},
                )

        self._capabilities[capability.name] = capability
        self._routes.update((tool.name, _Route(capability, tool)) for tool in tools)

        logger.info("Capability registered", capability=capability.name, tools=[t.name for t in tools])

    def get_mcp_tools(self) -> List[Tool]:
        return [
            Tool(name=route.tool.name, description=route.tool.description, inputSchema=route.tool.input_schema)
            for route in self._routes.values()
        ]

    def get_tool_names(self) -> List[str]:
        return list(self._routes)

    def has_tool(self, tool_name: str) -> bool:
        return tool_name in self._routes

    def get_capability(self, name: str) -> Optional[MathCapability]:
        return self._capabilities.get(name)

    def call_tool(self, tool_name: str, arguments: Dict[str, Any]) -> ToolResult:
        """Run a tool on the capability that registered it.

        Raises:
            RegistryError: if no capability registered the tool
        """
        route = self._routes.get(tool_name)
        if route is None:
            raise RegistryError(f"Unknown tool: '{tool_name}'", details={"tool": tool_name})

        logger.debug("Routing tool call", tool=tool_name, capability=route.capability.name)
        return route.capability.handle(tool_name, arguments)


_registry: Optional[ToolRegistry] = None


def get_registry() -> ToolRegistry:
    """Get or create the global tool registry."""
    global _registry
    if _registry is None:
        _registry = ToolRegistry()
    return _registry


def reset_registry() -> None:
    """Drop the global registry so the next get_registry() starts empty."""
    global _registry
    _registry = None


def initialize_registry() -> ToolRegistry:
    """Register the expression capability on the global registry, once."""
    from rpncalc.math_engine.capabilities import ExpressionCapability

    registry = get_registry()
    if registry.get_capability("expression") is None:
        registry.register_capability(ExpressionCapability())

    logger.info("Registry initialized", tools=registry.get_tool_names())
    return registry
