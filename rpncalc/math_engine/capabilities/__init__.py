"""Math Engine Capabilities Package.

This package contains individual capability modules that provide
specific mathematical functionality.
"""

from rpncalc.math_engine.capabilities.expression import ExpressionCapability

__all__ = ["ExpressionCapability"]
