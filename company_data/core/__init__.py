"""
Core utilities shared by the data-access layer.

This package provides:
- Logging configuration and correlation-id scoping
"""

from .logging import configure_logging, correlation_scope  # noqa: F401
