"""
Data-access layer for the companies/employees schema.

Exposes the connection factory, the company repository, and the pydantic
shapes it returns.
"""

from .core import configure_logging, correlation_scope
from .db import DatabaseContext, Settings, get_settings
from .errors import ConfigurationError
from .repositories import CompanyRepository, CompanyRepositoryPort
from .schemas import Company, CompanyForCreationDto, CompanyForUpdateDto, Employee

__all__ = [
    "Company",
    "CompanyForCreationDto",
    "CompanyForUpdateDto",
    "CompanyRepository",
    "CompanyRepositoryPort",
    "ConfigurationError",
    "configure_logging",
    "correlation_scope",
    "DatabaseContext",
    "Employee",
    "Settings",
    "get_settings",
]
