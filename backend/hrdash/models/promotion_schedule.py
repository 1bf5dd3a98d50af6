# backend/hrdash/models/promotion_schedule.py
from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from hrdash.db import Base, utcnow


class PromotionStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    completed = "completed"
    cancelled = "cancelled"


# Statuses that still show up in the "upcoming" view
OPEN_STATUSES = (PromotionStatus.pending, PromotionStatus.approved)


class PromotionSchedule(Base):
    """
    A planned future promotion. The only mutable, status-tracked entity:
    employee_id, current_position and current_salary are fixed at creation.
    """
    __tablename__ = "promotion_schedule"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False, index=True
    )

    current_position: Mapped[str] = mapped_column(Text(), nullable=False)
    target_position: Mapped[str] = mapped_column(Text(), nullable=False)
    current_salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    target_salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    scheduled_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    status: Mapped[PromotionStatus] = mapped_column(
        SAEnum(PromotionStatus, name="promotion_status"),
        nullable=False,
        default=PromotionStatus.pending,
        server_default=PromotionStatus.pending.value,
        index=True,
    )
    notes: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<PromotionSchedule {self.id} emp={self.employee_id} {self.status} @ {self.scheduled_date}>"
