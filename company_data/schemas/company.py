from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Employee(BaseModel):
    """Employee read model."""
    id: int = Field(..., description="Employee ID")
    name: Optional[str] = Field(None, description="Employee name")
    age: Optional[int] = Field(None)
    position: Optional[str] = Field(None)
    company_id: int = Field(..., description="Owning company ID")


class Company(BaseModel):
    """
    Company read model.

    employees is filled only by the joined fetches; every other read leaves it
    empty.
    """
    id: int = Field(..., description="Company ID (assigned by storage)")
    name: Optional[str] = Field(None, description="Company name")
    address: Optional[str] = Field(None)
    country: Optional[str] = Field(None)
    employees: List[Employee] = Field(default_factory=list)


class CompanyForCreationDto(BaseModel):
    """Create company payload."""
    name: str = Field(..., description="Name")
    address: Optional[str] = Field(None)
    country: Optional[str] = Field(None)


class CompanyForUpdateDto(BaseModel):
    """Update company payload; overwrites all three fields."""
    name: str = Field(..., description="Name")
    address: Optional[str] = Field(None)
    country: Optional[str] = Field(None)
