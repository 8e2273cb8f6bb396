"""
Bind-parameter structs, one per statement shape.

Each struct knows the exact names its SQL text binds, so a typo surfaces as a
missing attribute rather than an unbound parameter at execution time.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .company import CompanyForCreationDto, CompanyForUpdateDto


@dataclass(frozen=True)
class CompanyIdParams:
    id: int

    def as_params(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EmployeeIdParams:
    id: int

    def as_params(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CompanyWriteParams:
    name: str
    address: Optional[str]
    country: Optional[str]

    @classmethod
    def from_dto(cls, dto: CompanyForCreationDto) -> "CompanyWriteParams":
        return cls(name=dto.name, address=dto.address, country=dto.country)

    def as_params(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CompanyUpdateParams:
    id: int
    name: str
    address: Optional[str]
    country: Optional[str]

    @classmethod
    def from_dto(cls, company_id: int, dto: CompanyForUpdateDto) -> "CompanyUpdateParams":
        return cls(id=company_id, name=dto.name, address=dto.address, country=dto.country)

    def as_params(self) -> Dict[str, Any]:
        return asdict(self)
