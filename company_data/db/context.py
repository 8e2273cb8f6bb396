from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from company_data.core.logging import configure_logging
from company_data.errors import ConfigurationError

from .config import DEFAULT_CONNECTION_NAME, ConfigurationProvider, Settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def to_async_url(url: str) -> str:
    """
    Convert a PostgreSQL URL to the asyncpg-enabled SQLAlchemy form. URLs for
    other backends already carry their async driver and are returned as-is.
    """
    if url.startswith("postgresql+asyncpg://"):
        return url
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    # Replace any existing driver marker or bare scheme with +asyncpg
    return re.sub(r"^postgresql(\+\w+)?://", "postgresql+asyncpg://", url)


class DatabaseContext:
    """
    Connection factory for the companies database.

    The connection string is resolved once, when the context is built. Each
    call to create_connection() hands out a fresh AsyncConnection; pooling is
    left to the engine's default pool.
    """

    def __init__(
        self,
        configuration: ConfigurationProvider,
        name: str = DEFAULT_CONNECTION_NAME,
        *,
        echo: bool = False,
        engine_options: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._name = name
        self._connection_string = configuration.get_connection_string(name)
        self._echo = echo
        self._engine_options = dict(engine_options or {})
        self._engine: AsyncEngine | None = None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "DatabaseContext":
        """
        Build a context for the settings' configured connection name. When
        LOG_LEVEL is set, package logging is configured at that level first.
        """
        if settings.LOG_LEVEL:
            configure_logging(settings.LOG_LEVEL)
        kwargs.setdefault("echo", settings.SQL_ECHO)
        return cls(settings, settings.CONNECTION_NAME, **kwargs)

    @property
    def connection_string(self) -> Optional[str]:
        return self._connection_string

    def _ensure_engine_initialized(self) -> AsyncEngine:
        """Lazily build the AsyncEngine on first use."""
        if self._engine is None:
            if not self._connection_string:
                raise ConfigurationError(
                    f"Connection string '{self._name}' is not configured. Set it in "
                    "CONNECTION_STRINGS or provide the POSTGRES_* variables."
                )
            self._engine = create_async_engine(
                to_async_url(self._connection_string),
                echo=self._echo,
                **self._engine_options,
            )
            logger.info("Database engine created for connection '%s'.", self._name)
        return self._engine

    # PUBLIC_INTERFACE
    def create_connection(self) -> AsyncConnection:
        """
        Return a new, unopened AsyncConnection.

        Use it as ``async with context.create_connection() as conn:`` so the
        connection is opened on entry and released on every exit path.

        Raises:
            ConfigurationError: if the named connection string is missing.
        """
        return self._ensure_engine_initialized().connect()

    # PUBLIC_INTERFACE
    async def dispose(self) -> None:
        """Close pooled connections held by the engine, if one was built."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info("Database engine for connection '%s' disposed.", self._name)
