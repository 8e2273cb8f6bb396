"""
Public Pydantic schemas returned by and passed into the repositories.

Read models mirror table rows; DTOs carry caller input into create/update calls.
"""

from .company import Company, CompanyForCreationDto, CompanyForUpdateDto, Employee  # noqa: F401
from .params import (  # noqa: F401
    CompanyIdParams,
    CompanyUpdateParams,
    CompanyWriteParams,
    EmployeeIdParams,
)
