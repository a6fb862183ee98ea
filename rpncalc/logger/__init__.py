"""Logger module for rpncalc

Provides a small logging interface plus a structured implementation so that
users can drop in their own logger.

Usage:
    from rpncalc.logger import session_logger as logger

    logger.info("Expression evaluated", expression="1+2", result=3.0)
"""

import logging
import os

from rpncalc.logger.interface import Logger
from rpncalc.logger.structured_logger import StructuredLogger

# Configuration from environment
LOG_LEVEL_STR = os.environ.get("RPNCALC_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("RPNCALC_LOG_FILE")
LOG_JSON = os.environ.get("RPNCALC_LOG_JSON", "false").lower() == "true"

# Map string level to logging constant
LOG_LEVEL = getattr(logging, LOG_LEVEL_STR, logging.INFO)

# Shared logger instance
session_logger: Logger = StructuredLogger(
    level=LOG_LEVEL,
    log_file=LOG_FILE,
    json_format=LOG_JSON,
)

__all__ = [
    "Logger",
    "StructuredLogger",
    "session_logger",
]
