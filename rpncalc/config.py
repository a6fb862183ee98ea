"""Application configuration

Settings are read from environment variables with the RPNCALC_ prefix.
Tests may override any value with Config.set_test_mode().
"""

import os
from typing import Any, Dict, Optional

from rpncalc.exceptions import ConfigurationError

# Project-specific prefix
_ENV_PREFIX = "RPNCALC"

_DEFAULTS: Dict[str, Any] = {
    "max_expression_length": 10000,
    "mcp_host": "0.0.0.0",
    "mcp_port": 8020,
    "web_host": "0.0.0.0",
    "web_port": 8022,
}


def _env_name(key: str) -> str:
    return f"{_ENV_PREFIX}_{key.upper()}"


class Config:
    """Project configuration resolved from environment variables."""

    _env_prefix = _ENV_PREFIX
    _overrides: Optional[Dict[str, Any]] = None

    @classmethod
    def _get(cls, key: str) -> Any:
        if cls._overrides is not None and key in cls._overrides:
            return cls._overrides[key]

        default = _DEFAULTS[key]
        raw = os.environ.get(_env_name(key))
        if raw is None:
            return default

        if isinstance(default, int):
            try:
                return int(raw)
            except ValueError:
                raise ConfigurationError(
                    f"{_env_name(key)} must be an integer, got '{raw}'",
                    details={"variable": _env_name(key), "value": raw},
                )
        return raw

    @classmethod
    def get_max_expression_length(cls) -> int:
        """Maximum number of characters accepted in one expression."""
        limit = cls._get("max_expression_length")
        if limit <= 0:
            raise ConfigurationError(
                "max_expression_length must be positive",
                details={"value": limit},
            )
        return limit

    @classmethod
    def get_mcp_host(cls) -> str:
        return cls._get("mcp_host")

    @classmethod
    def get_mcp_port(cls) -> int:
        return cls._get("mcp_port")

    @classmethod
    def get_web_host(cls) -> str:
        return cls._get("web_host")

    @classmethod
    def get_web_port(cls) -> int:
        return cls._get("web_port")

    @classmethod
    def set_test_mode(cls, **overrides: Any) -> None:
        """Override settings for the duration of a test."""
        unknown = set(overrides) - set(_DEFAULTS)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {sorted(unknown)}",
                details={"keys": sorted(unknown)},
            )
        cls._overrides = dict(overrides)

    @classmethod
    def clear_test_mode(cls) -> None:
        cls._overrides = None


__all__ = [
    "Config",
]
