from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from sqlalchemy import Executable
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from company_data.db.context import DatabaseContext

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base class for repositories providing common helpers.

    Repositories never keep a connection between calls: every operation opens
    one through connection() and it is closed (rolling back anything not
    committed) when the block exits.
    """

    def __init__(self, context: DatabaseContext) -> None:
        self.context = context

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[AsyncConnection]:
        """Open a connection for the duration of the block."""
        async with self.context.create_connection() as conn:
            try:
                yield conn
            except SQLAlchemyError as e:
                logger.error("Database operation failed: %s", e)
                raise

    async def execute(
        self, conn: AsyncConnection, statement: Executable, params: Optional[Dict[str, Any]] = None
    ):
        """Execute a statement."""
        return await conn.execute(statement, params or {})

    async def fetch_all(
        self, conn: AsyncConnection, statement: Executable, params: Optional[Dict[str, Any]] = None
    ) -> List[RowMapping]:
        """Execute and return every row as a mapping."""
        result = await self.execute(conn, statement, params)
        return list(result.mappings().all())

    async def fetch_one_or_none(
        self, conn: AsyncConnection, statement: Executable, params: Optional[Dict[str, Any]] = None
    ) -> Optional[RowMapping]:
        """Execute and return the single row, or None. More than one row is an error."""
        result = await self.execute(conn, statement, params)
        return result.mappings().one_or_none()

    async def fetch_first(
        self, conn: AsyncConnection, statement: Executable, params: Optional[Dict[str, Any]] = None
    ) -> Optional[RowMapping]:
        """Execute and return the first row, or None."""
        result = await self.execute(conn, statement, params)
        return result.mappings().first()
