# backend/hrdash/schemas/employee.py
from __future__ import annotations

from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, EmailStr, Field

from hrdash.schemas.base import ORMRead, PartialUpdate, RowId, UTCDateTime


class EmployeeCreate(BaseModel):
    name: str
    employee_id: str = Field(..., max_length=64, description="External employee code, e.g. EMP001")
    email: EmailStr
    department: str
    position: str
    hire_date: UTCDateTime


class EmployeeUpdate(PartialUpdate):
    # employee_id and hire_date are not editable
    id: RowId
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    department: Optional[str] = None
    position: Optional[str] = None

    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"name", "email", "department", "position"})


class EmployeeRead(ORMRead):
    id: int
    name: str
    employee_id: str
    email: str
    department: str
    position: str
    hire_date: UTCDateTime
    created_at: UTCDateTime
    updated_at: UTCDateTime
