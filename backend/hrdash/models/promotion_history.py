# backend/hrdash/models/promotion_history.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from hrdash.db import Base, utcnow


class PromotionHistory(Base):
    """
    Append-only record of a completed position/salary transition.
    previous_* are NULL for the first recorded position.
    """
    __tablename__ = "promotion_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False, index=True
    )

    previous_position: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    new_position: Mapped[str] = mapped_column(Text(), nullable=False)
    previous_salary: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    new_salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # decided vs takes effect
    promotion_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    effective_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    notes: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<PromotionHistory emp={self.employee_id} {self.new_position} @ {self.promotion_date}>"
