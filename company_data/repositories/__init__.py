"""
Repository layer for data access.

Repositories own the SQL text for their tables and map result rows into the
pydantic read models. Each call acquires its own connection from the
DatabaseContext and releases it before returning.
"""

from .company import CompanyRepository  # noqa: F401
from .contracts import CompanyRepositoryPort  # noqa: F401
