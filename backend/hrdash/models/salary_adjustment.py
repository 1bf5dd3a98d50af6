# backend/hrdash/models/salary_adjustment.py
from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from hrdash.db import Base, utcnow


class AdjustmentType(str, enum.Enum):
    annual_increase = "annual_increase"
    promotion = "promotion"
    performance = "performance"
    other = "other"


class SalaryAdjustment(Base):
    __tablename__ = "salary_adjustments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False, index=True
    )

    previous_salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    new_salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    adjustment_type: Mapped[AdjustmentType] = mapped_column(
        SAEnum(AdjustmentType, name="adjustment_type"), nullable=False
    )
    # NULL when derived from a zero previous salary
    adjustment_percentage: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2), nullable=True)

    effective_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    notes: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<SalaryAdjustment emp={self.employee_id} {self.adjustment_type} eff={self.effective_date}>"
