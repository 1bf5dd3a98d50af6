# backend/hrdash/schemas/promotion_history.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, field_serializer

from hrdash.schemas.base import Money, ORMRead, RowId, UTCDateTime, money_out


class PromotionHistoryCreate(BaseModel):
    employee_id: RowId
    previous_position: Optional[str] = None  # None = first recorded position
    new_position: str
    previous_salary: Optional[Money] = None
    new_salary: Money
    promotion_date: UTCDateTime
    effective_date: UTCDateTime
    notes: Optional[str] = None


class PromotionHistoryRead(ORMRead):
    id: int
    employee_id: int
    previous_position: Optional[str] = None
    new_position: str
    previous_salary: Optional[Decimal] = None
    new_salary: Decimal
    promotion_date: UTCDateTime
    effective_date: UTCDateTime
    notes: Optional[str] = None
    created_at: UTCDateTime

    # ensure JSON returns numbers, not strings
    @field_serializer("previous_salary", "new_salary")
    def _serialize_money(self, v: Optional[Decimal]):
        return money_out(v)
