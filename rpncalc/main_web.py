"""rpncalc Web Server entry point."""

import argparse
import sys

import uvicorn

from rpncalc.config import Config
from rpncalc.exceptions import ConfigurationError
from rpncalc.logger import Logger, session_logger
from rpncalc.web_server.web_server import RpnCalcWebServer

logger: Logger = session_logger


def main() -> None:
    try:
        default_host = Config.get_web_host()
        default_port = Config.get_web_port()
    except ConfigurationError as e:
        logger.error("FATAL: Invalid configuration", error=e.message)
        sys.exit(1)

    parser = argparse.ArgumentParser(description="rpncalc Web Server - expression REST API")
    parser.add_argument(
        "--host",
        type=str,
        default=default_host,
        help="Host address to bind to (default: 0.0.0.0, or RPNCALC_WEB_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=default_port,
        help="Port number to listen on (default: 8022, or RPNCALC_WEB_PORT env var)",
    )
    args = parser.parse_args()

    server = RpnCalcWebServer(host=args.host, port=args.port)

    try:
        logger.info("=" * 70)
        logger.info("STARTING RPNCALC WEB SERVER")
        logger.info("=" * 70)
        logger.info("Configuration", host=args.host, port=args.port)
        logger.info(f"Evaluate: POST http://{args.host}:{args.port}/evaluate")
        logger.info(f"Postfix: POST http://{args.host}:{args.port}/postfix")
        logger.info(f"Health check: http://{args.host}:{args.port}/health")
        logger.info("=" * 70)
        uvicorn.run(server.app, host=args.host, port=args.port, log_level="info")
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
