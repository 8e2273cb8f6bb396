from __future__ import annotations

from typing import Dict, Optional, Protocol

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CONNECTION_NAME = "SqlConnection"


class ConfigurationProvider(Protocol):
    """Anything that can hand out a connection string by name."""

    def get_connection_string(self, name: str) -> Optional[str]:
        ...


class Settings(BaseSettings):
    """
    Database settings for the companies data-access layer.

    Reads from environment variables (or .env via pydantic-settings). Named
    connection strings come from CONNECTION_STRINGS (a JSON object); the
    default name may also be composed from the POSTGRES_* variables:
      - POSTGRES_URL
      - POSTGRES_USER
      - POSTGRES_PASSWORD
      - POSTGRES_DB
      - POSTGRES_HOST
      - POSTGRES_PORT
    """

    CONNECTION_STRINGS: Dict[str, str] = Field(
        default_factory=dict,
        description='Named connection strings, e.g. {"SqlConnection": "postgresql://..."}',
    )
    CONNECTION_NAME: str = Field(
        default=DEFAULT_CONNECTION_NAME,
        description="Name of the connection string the data layer resolves.",
    )

    # Fallback for the default connection name
    POSTGRES_URL: Optional[str] = Field(
        default=None, description="If provided, full PostgreSQL connection URL."
    )
    POSTGRES_USER: Optional[str] = Field(default=None, description="DB username")
    POSTGRES_PASSWORD: Optional[str] = Field(default=None, description="DB password")
    POSTGRES_DB: Optional[str] = Field(default=None, description="Database name")
    POSTGRES_PORT: Optional[int] = Field(
        default=5432, description="Database port (default 5432)"
    )
    POSTGRES_HOST: Optional[str] = Field(
        default="localhost", description="Database host (default localhost)"
    )

    LOG_LEVEL: Optional[str] = Field(
        default=None,
        description="If set (e.g. INFO, DEBUG), DatabaseContext.from_settings configures package logging at this level.",
    )

    # SQLAlchemy engine options
    SQL_ECHO: bool = Field(
        default=False, description="Echo SQL statements for debugging (default False)"
    )

    # General environment
    ENVIRONMENT: Optional[str] = Field(
        default=None, description="Environment label (dev/test/prod)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def postgres_url(self) -> Optional[str]:
        """
        URL built from the POSTGRES_* variables. Prefers POSTGRES_URL; returns
        None when user, password or database name is missing.
        """
        if self.POSTGRES_URL:
            return self.POSTGRES_URL
        if not all([self.POSTGRES_USER, self.POSTGRES_PASSWORD, self.POSTGRES_DB]):
            return None
        host = self.POSTGRES_HOST or "localhost"
        port = self.POSTGRES_PORT or 5432
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{host}:{port}/{self.POSTGRES_DB}"

    # PUBLIC_INTERFACE
    def get_connection_string(self, name: str) -> Optional[str]:
        """
        Look up a named connection string.

        Names listed in CONNECTION_STRINGS win. The configured CONNECTION_NAME
        falls back to the POSTGRES_* variables. Anything else yields None.
        """
        value = self.CONNECTION_STRINGS.get(name)
        if value:
            return value
        if name == self.CONNECTION_NAME:
            return self.postgres_url
        return None


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return a settings object populated from the environment."""
    return Settings()
