from __future__ import annotations

from typing import Dict, Optional

import pytest_asyncio
from sqlalchemy import text

from company_data.db.context import DatabaseContext
from company_data.repositories.company import CompanyRepository

SCHEMA_STATEMENTS = [
    """
    CREATE TABLE companies (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        name        VARCHAR(50),
        address     VARCHAR(60),
        country     VARCHAR(50)
    )
    """,
    """
    CREATE TABLE employees (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        name        VARCHAR(50),
        age         INTEGER,
        position    VARCHAR(50),
        company_id  INTEGER NOT NULL REFERENCES companies(id) ON DELETE CASCADE
    )
    """,
]


class StaticConfiguration:
    """Dict-backed configuration provider."""

    def __init__(self, values: Dict[str, str]) -> None:
        self.values = values
        self.lookups = []

    def get_connection_string(self, name: str) -> Optional[str]:
        self.lookups.append(name)
        return self.values.get(name)


@pytest_asyncio.fixture
async def context(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'companies.db'}"
    ctx = DatabaseContext(StaticConfiguration({"SqlConnection": url}))
    async with ctx.create_connection() as conn:
        for ddl in SCHEMA_STATEMENTS:
            await conn.execute(text(ddl))
        await conn.commit()
    yield ctx
    await ctx.dispose()


@pytest_asyncio.fixture
async def repository(context):
    return CompanyRepository(context)


async def add_employee(context, company_id: int, name: str, age: int = 30, position: str = "Engineer") -> int:
    async with context.create_connection() as conn:
        result = await conn.execute(
            text(
                "INSERT INTO employees (name, age, position, company_id) "
                "VALUES (:name, :age, :position, :company_id) RETURNING id"
            ),
            {"name": name, "age": age, "position": position, "company_id": company_id},
        )
        employee_id = result.scalar_one()
        await conn.commit()
    return employee_id
