from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import Integer, bindparam, text

from company_data.schemas.company import Company, CompanyForCreationDto, CompanyForUpdateDto
from company_data.schemas.params import (
    CompanyIdParams,
    CompanyUpdateParams,
    CompanyWriteParams,
    EmployeeIdParams,
)
from .base import BaseRepository
from .mappers import company_from_row, employee_from_row, fold_company_employees

logger = logging.getLogger(__name__)

SELECT_COMPANIES = text(
    "SELECT id, name, address, country FROM companies ORDER BY id"
)

SELECT_COMPANY_BY_ID = text(
    "SELECT id, name, address, country FROM companies WHERE id = :id"
)

SELECT_EMPLOYEES_BY_COMPANY_ID = text(
    "SELECT id, name, age, position, company_id FROM employees "
    "WHERE company_id = :id ORDER BY id"
)

SELECT_COMPANIES_WITH_EMPLOYEES = text(
    """
    SELECT
        companies.id AS company_id,
        companies.name AS company_name,
        companies.address AS company_address,
        companies.country AS company_country,
        employees.id AS employee_id,
        employees.name AS employee_name,
        employees.age AS employee_age,
        employees.position AS employee_position,
        employees.company_id AS employee_company_id
    FROM companies
    JOIN employees ON companies.id = employees.company_id
    ORDER BY companies.id, employees.id
    """
)

INSERT_COMPANY = text(
    "INSERT INTO companies (name, address, country) "
    "VALUES (:name, :address, :country) RETURNING id"
)

UPDATE_COMPANY = text(
    "UPDATE companies SET name = :name, address = :address, country = :country "
    "WHERE id = :id"
)

DELETE_COMPANY = text("DELETE FROM companies WHERE id = :id")

# Set-returning function yielding zero or one companies row. The name is
# quoted, so it must be created with the same mixed case (CREATE FUNCTION
# "ShowCompanyForProvidedEmployeeId"(id integer) ...).
COMPANY_BY_EMPLOYEE_PROCEDURE = "ShowCompanyForProvidedEmployeeId"

SELECT_COMPANY_BY_EMPLOYEE_ID = text(
    f'SELECT id, name, address, country FROM "{COMPANY_BY_EMPLOYEE_PROCEDURE}"(:id)'
).bindparams(bindparam("id", type_=Integer))


class CompanyRepository(BaseRepository):
    """Repository for companies and their employees."""

    async def get_companies(self) -> List[Company]:
        async with self.connection() as conn:
            rows = await self.fetch_all(conn, SELECT_COMPANIES)
        return [company_from_row(r) for r in rows]

    async def get_company(self, company_id: int) -> Optional[Company]:
        params = CompanyIdParams(id=company_id)
        async with self.connection() as conn:
            row = await self.fetch_one_or_none(conn, SELECT_COMPANY_BY_ID, params.as_params())
        if row is None:
            logger.debug("Company %s not found.", company_id)
            return None
        return company_from_row(row)

    async def get_company_employees_multiple_result(self, company_id: int) -> Optional[Company]:
        """
        Fetch one company and its employees with two statements issued in
        order on one connection inside a single transaction.

        Employees are not queried when the company row is missing.
        """
        params = CompanyIdParams(id=company_id).as_params()
        async with self.connection() as conn:
            async with conn.begin():
                row = await self.fetch_one_or_none(conn, SELECT_COMPANY_BY_ID, params)
                if row is None:
                    logger.debug("Company %s not found.", company_id)
                    return None
                company = company_from_row(row)
                employee_rows = await self.fetch_all(conn, SELECT_EMPLOYEES_BY_COMPANY_ID, params)
        company.employees = [employee_from_row(r) for r in employee_rows]
        return company

    async def get_company_employees_multiple_mapping(self) -> List[Company]:
        """
        Fetch every company that has employees through one join, folding the
        per-employee rows back into one Company each.
        """
        async with self.connection() as conn:
            rows = await self.fetch_all(conn, SELECT_COMPANIES_WITH_EMPLOYEES)
        companies = fold_company_employees(rows)
        logger.debug("Folded %d joined rows into %d companies.", len(rows), len(companies))
        return companies

    async def get_company_by_employee_id(self, employee_id: int) -> Optional[Company]:
        params = EmployeeIdParams(id=employee_id)
        async with self.connection() as conn:
            row = await self.fetch_first(conn, SELECT_COMPANY_BY_EMPLOYEE_ID, params.as_params())
        if row is None:
            logger.debug("No company found for employee %s.", employee_id)
            return None
        return company_from_row(row)

    async def create_company(self, company: CompanyForCreationDto) -> Company:
        params = CompanyWriteParams.from_dto(company)
        async with self.connection() as conn:
            result = await self.execute(conn, INSERT_COMPANY, params.as_params())
            company_id = int(result.scalar_one())
            await conn.commit()
        logger.info("Created company %s.", company_id)
        return Company(
            id=company_id,
            name=params.name,
            address=params.address,
            country=params.country,
        )

    async def update_company(self, company_id: int, company: CompanyForUpdateDto) -> None:
        params = CompanyUpdateParams.from_dto(company_id, company)
        async with self.connection() as conn:
            result = await self.execute(conn, UPDATE_COMPANY, params.as_params())
            await conn.commit()
        logger.debug("Update of company %s touched %d row(s).", company_id, result.rowcount)

    async def delete_company(self, company_id: int) -> None:
        params = CompanyIdParams(id=company_id)
        async with self.connection() as conn:
            result = await self.execute(conn, DELETE_COMPANY, params.as_params())
            await conn.commit()
        logger.debug("Delete of company %s touched %d row(s).", company_id, result.rowcount)
