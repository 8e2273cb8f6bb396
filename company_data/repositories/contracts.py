from __future__ import annotations

from typing import List, Optional, Protocol

from company_data.schemas.company import Company, CompanyForCreationDto, CompanyForUpdateDto


class CompanyRepositoryPort(Protocol):
    async def get_companies(self) -> List[Company]:
        ...

    async def get_company(self, company_id: int) -> Optional[Company]:
        ...

    async def get_company_employees_multiple_result(self, company_id: int) -> Optional[Company]:
        ...

    async def get_company_employees_multiple_mapping(self) -> List[Company]:
        ...

    async def get_company_by_employee_id(self, employee_id: int) -> Optional[Company]:
        ...

    async def create_company(self, company: CompanyForCreationDto) -> Company:
        ...

    async def update_company(self, company_id: int, company: CompanyForUpdateDto) -> None:
        ...

    async def delete_company(self, company_id: int) -> None:
        ...
