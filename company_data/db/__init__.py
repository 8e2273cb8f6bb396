"""
Database package initializer exposing configuration and the connection factory.
"""

from .config import ConfigurationProvider, Settings, get_settings
from .context import DatabaseContext, to_async_url

__all__ = [
    "ConfigurationProvider",
    "DatabaseContext",
    "Settings",
    "get_settings",
    "to_async_url",
]
