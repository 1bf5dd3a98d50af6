# backend/hrdash/schemas/salary_adjustment.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_serializer

from hrdash.models.salary_adjustment import AdjustmentType
from hrdash.schemas.base import Money, ORMRead, Percentage, RowId, UTCDateTime, money_out


class SalaryAdjustmentCreate(BaseModel):
    employee_id: RowId
    previous_salary: Money
    new_salary: Money
    adjustment_type: AdjustmentType
    adjustment_percentage: Optional[Percentage] = Field(
        None, description="Derived from the two salaries when omitted"
    )
    effective_date: UTCDateTime
    notes: Optional[str] = None


class SalaryAdjustmentRead(ORMRead):
    id: int
    employee_id: int
    previous_salary: Decimal
    new_salary: Decimal
    adjustment_type: AdjustmentType
    adjustment_percentage: Optional[Decimal] = None
    effective_date: UTCDateTime
    notes: Optional[str] = None
    created_at: UTCDateTime

    @field_serializer("previous_salary", "new_salary", "adjustment_percentage")
    def _serialize_numbers(self, v: Optional[Decimal]):
        return money_out(v)
