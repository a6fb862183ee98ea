"""rpncalc MCP Server entry point."""

import argparse
import asyncio
import sys

from rpncalc.config import Config
from rpncalc.exceptions import ConfigurationError
from rpncalc.logger import Logger, session_logger

logger: Logger = session_logger


def main() -> None:
    try:
        default_host = Config.get_mcp_host()
        default_port = Config.get_mcp_port()
    except ConfigurationError as e:
        logger.error("FATAL: Invalid configuration", error=e.message)
        sys.exit(1)

    parser = argparse.ArgumentParser(
        description="rpncalc MCP Server - infix expression evaluation via Model Context Protocol"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=default_host,
        help="Host address to bind to (default: 0.0.0.0, or RPNCALC_MCP_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=default_port,
        help="Port number to listen on (default: 8020, or RPNCALC_MCP_PORT env var)",
    )
    args = parser.parse_args()

    from rpncalc.mcp_server.mcp_server import main as serve

    try:
        logger.info("=" * 70)
        logger.info("STARTING RPNCALC MCP SERVER")
        logger.info("=" * 70)
        logger.info(
            "Configuration",
            host=args.host,
            port=args.port,
            transport="HTTP Streamable",
            max_expression_length=Config.get_max_expression_length(),
        )
        logger.info(f"MCP endpoint: http://{args.host}:{args.port}/mcp")
        logger.info("=" * 70)
        asyncio.run(serve(host=args.host, port=args.port))
        logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
