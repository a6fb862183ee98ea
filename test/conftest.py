"""Pytest configuration and fixtures

Provides shared fixtures for all tests: configuration isolation, a fresh
tool registry and a capability instance.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from rpncalc.config import Config  # noqa: E402 - after sys.path setup
from rpncalc.mcp_server import tool_registry  # noqa: E402


# ============================================================================
# CONFIGURATION
# ============================================================================


@pytest.fixture(scope="function", autouse=True)
def isolated_config():
    """
    Reset configuration overrides around every test.

    Tests that need a specific setting call Config.set_test_mode(...)
    themselves; whatever they set is cleared afterwards.
    """
    Config.clear_test_mode()

    yield Config

    Config.clear_test_mode()


@pytest.fixture(scope="function")
def short_expression_limit():
    """Limit expressions to 16 characters for the duration of a test."""
    Config.set_test_mode(max_expression_length=16)
    return 16


# ============================================================================
# MATH ENGINE AND REGISTRY
# ============================================================================


@pytest.fixture(scope="function")
def capability():
    """Provide a fresh ExpressionCapability."""
    from rpncalc.math_engine.capabilities import ExpressionCapability

    return ExpressionCapability()


@pytest.fixture(scope="function")
def registry():
    """
    Provide the global tool registry, initialized with all capabilities.

    The global registry is dropped before and after the test so that
    registrations never leak between tests.
    """
    tool_registry.reset_registry()

    yield tool_registry.initialize_registry()

    tool_registry.reset_registry()
