# backend/hrdash/schemas/promotion_schedule.py
from __future__ import annotations

from decimal import Decimal
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, field_serializer

from hrdash.models.promotion_schedule import PromotionStatus
from hrdash.schemas.base import Money, ORMRead, PartialUpdate, RowId, UTCDateTime, money_out


class PromotionScheduleCreate(BaseModel):
    employee_id: RowId
    current_position: str
    target_position: str
    current_salary: Money
    target_salary: Money
    scheduled_date: UTCDateTime
    status: PromotionStatus = PromotionStatus.pending
    notes: Optional[str] = None


class PromotionScheduleUpdate(PartialUpdate):
    """
    employee_id, current_position and current_salary are fixed at creation;
    unknown keys in the payload are ignored. ``notes: null`` clears the notes,
    omitting it leaves them untouched.
    """
    id: RowId
    target_position: Optional[str] = None
    target_salary: Optional[Money] = None
    scheduled_date: Optional[UTCDateTime] = None
    status: Optional[PromotionStatus] = None
    notes: Optional[str] = None

    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"target_position", "target_salary", "scheduled_date", "status"}
    )


class PromotionScheduleRead(ORMRead):
    id: int
    employee_id: int
    current_position: str
    target_position: str
    current_salary: Decimal
    target_salary: Decimal
    scheduled_date: UTCDateTime
    status: PromotionStatus
    notes: Optional[str] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime

    @field_serializer("current_salary", "target_salary")
    def _serialize_money(self, v: Decimal):
        return money_out(v)
