"""
Row-to-model mapping for each query shape the company repository issues.

Plain companies/employees rows use the table's column names. The join query
prefixes every column with its table ("company_" / "employee_") so the two
halves of a row never collide.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Tuple

from company_data.schemas.company import Company, Employee


def company_from_row(row: Mapping[str, Any]) -> Company:
    return Company(
        id=row["id"],
        name=row["name"],
        address=row["address"],
        country=row["country"],
    )


def employee_from_row(row: Mapping[str, Any]) -> Employee:
    return Employee(
        id=row["id"],
        name=row["name"],
        age=row["age"],
        position=row["position"],
        company_id=row["company_id"],
    )


def split_joined_row(row: Mapping[str, Any]) -> Tuple[Company, Employee]:
    """Pull the company half and the employee half out of one join row."""
    company = Company(
        id=row["company_id"],
        name=row["company_name"],
        address=row["company_address"],
        country=row["company_country"],
    )
    employee = Employee(
        id=row["employee_id"],
        name=row["employee_name"],
        age=row["employee_age"],
        position=row["employee_position"],
        company_id=row["employee_company_id"],
    )
    return company, employee


def fold_company_employees(rows: Iterable[Mapping[str, Any]]) -> List[Company]:
    """
    Collapse (company, employee) join rows into one Company per company id.

    Companies come out in the order their id is first seen; each one's
    employees keep the order of their rows.
    """
    companies: Dict[int, Company] = {}
    for row in rows:
        company, employee = split_joined_row(row)
        current = companies.get(company.id)
        if current is None:
            current = company
            companies[company.id] = current
        current.employees.append(employee)
    return list(companies.values())
