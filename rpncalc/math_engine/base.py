"""Capability interface and the values passed between capabilities and servers.

A capability owns a set of named tools. Servers list the tools through
get_tools() and dispatch calls through handle(); every call returns a
ToolResult whose ``kind`` tells the caller what ``result`` holds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Union


class ResultKind(str, Enum):
    POSTFIX = "postfix"
    VALUE = "value"
    OPERATORS = "operators"


# A non-finite VALUE is carried as "inf", "-inf" or "nan"
ResultPayload = Union[str, float, Dict[str, Any]]


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool call, ready for JSON encoding."""

    kind: ResultKind
    result: ResultPayload

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "result": self.result}


@dataclass(frozen=True)
class ToolDefinition:
    """A tool as advertised to MCP clients."""

    name: str
    description: str
    input_schema: Dict[str, Any]


class MathCapability(ABC):
    """A named group of tools served by the MCP and web servers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. 'expression'."""

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def get_tools(self) -> List[ToolDefinition]:
        pass

    @abstractmethod
    def handle(self, tool_name: str, arguments: Dict[str, Any]) -> ToolResult:
        """Run one tool.

        Raises:
            InvalidInputError: for an unknown tool or bad arguments
            ExpressionError: if the expression cannot be parsed or evaluated
        """
