from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when no usable connection string can be resolved."""
