#!/usr/bin/env python3
"""rpncalc MCP Server - Expression Evaluation Service.

This module provides the MCP server implementation with tool routing
handled by the centralized tool registry.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
from typing import Any, AsyncIterator, Dict, List

from mcp.server import Server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Mount

from rpncalc.errors import map_error_for_mcp
from rpncalc.exceptions import RpnCalcError
from rpncalc.logger import session_logger as logger
from rpncalc.mcp_server.tool_registry import get_registry, initialize_registry

SERVICE_NAME = "rpncalc"

app = Server("rpncalc-service")


def _json_text(data: Any) -> TextContent:
    """Create strict JSON text content; inf/nan must already be strings."""
    return TextContent(type="text", text=json.dumps(data, allow_nan=False))


# Built-in tools (not from math engine)
BUILTIN_TOOLS = [
    Tool(
        name="ping",
        description="Health check - returns server status",
        inputSchema={"type": "object", "properties": {}},
    ),
]


@app.list_tools()
async def handle_list_tools() -> List[Tool]:
    """List available tools."""
    registry = get_registry()
    return BUILTIN_TOOLS + registry.get_mcp_tools()


@app.call_tool()
async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
    """Handle tool invocations."""
    logger.info("Tool called", tool=name, args=arguments)

    if name == "ping":
        return [_json_text({"status": "ok", "service": SERVICE_NAME})]

    registry = get_registry()
    if registry.has_tool(name):
        return await _handle_registry_tool(name, arguments or {})

    return [_json_text(map_error_for_mcp(
        RpnCalcError(code="REGISTRY_ERROR", message=f"Unknown tool: {name}")
    ))]


async def _handle_registry_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
    """Handle tool invocation via registry."""
    try:
        registry = get_registry()
        result = registry.call_tool(name, arguments)
        return [_json_text(result.to_dict())]

    except RpnCalcError as e:
        logger.warning("Tool rejected input", tool=name, error_code=e.code, error=e.message)
        return [_json_text(map_error_for_mcp(e))]
    except Exception as e:
        logger.error("Tool execution failed", tool=name, error=str(e))
        return [_json_text(map_error_for_mcp(e))]


async def initialize_server() -> None:
    """Initialize server components."""
    initialize_registry()
    logger.info("rpncalc MCP server initialized")


# Streamable HTTP setup
session_manager_http = StreamableHTTPSessionManager(
    app=app,
    event_store=None,
    json_response=False,
    stateless=False,
)


async def handle_streamable_http(scope, receive, send) -> None:
    """Handle HTTP requests."""
    await session_manager_http.handle_request(scope, receive, send)


@contextlib.asynccontextmanager
async def lifespan(starlette_app) -> AsyncIterator[None]:
    """Manage server lifecycle."""
    logger.info("Starting rpncalc MCP server")
    await initialize_server()
    async with session_manager_http.run():
        yield


starlette_app = Starlette(
    debug=False,
    routes=[Mount("/mcp/", app=handle_streamable_http)],
    lifespan=lifespan,
)

asgi_app = CORSMiddleware(
    starlette_app,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "DELETE"],
    expose_headers=["Mcp-Session-Id"],
)


async def main(host: str = "0.0.0.0", port: int = 8020) -> None:
    """Run the server."""
    import uvicorn

    config = uvicorn.Config(asgi_app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
