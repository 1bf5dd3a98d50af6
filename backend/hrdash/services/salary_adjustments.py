# backend/hrdash/services/salary_adjustments.py
from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from hrdash.db import in_id_range
from hrdash.models.salary_adjustment import SalaryAdjustment
from hrdash.schemas.salary_adjustment import SalaryAdjustmentCreate
from hrdash.services.employees import require_employee

logger = logging.getLogger(__name__)


# ----------------------------- Decimal helpers ----------------------------- #

def D(val) -> Decimal:
    return val if isinstance(val, Decimal) else Decimal(str(val))


def q2(val) -> Decimal:
    return D(val).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def adjustment_percentage(previous_salary, new_salary) -> Optional[Decimal]:
    """
    Percent change from previous to new salary, rounded to 2 dp (half-up).
    Returns None when the previous salary is zero.
    """
    prev = D(previous_salary)
    if prev == 0:
        return None
    return q2((D(new_salary) - prev) / prev * 100)


# ------------------------------- Handlers --------------------------------- #

def create_salary_adjustment(db: Session, data: SalaryAdjustmentCreate) -> SalaryAdjustment:
    require_employee(db, data.employee_id)

    pct = data.adjustment_percentage
    if pct is None:
        pct = adjustment_percentage(data.previous_salary, data.new_salary)

    row = SalaryAdjustment(
        employee_id=data.employee_id,
        previous_salary=data.previous_salary,
        new_salary=data.new_salary,
        adjustment_type=data.adjustment_type,
        adjustment_percentage=pct,
        effective_date=data.effective_date,
        notes=data.notes,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(
        "salary adjustment recorded id=%s employee=%s type=%s",
        row.id, row.employee_id, row.adjustment_type.value,
    )
    return row


def list_salary_adjustments(db: Session, employee_id: int) -> List[SalaryAdjustment]:
    if not in_id_range(employee_id):
        return []
    stmt = (
        select(SalaryAdjustment)
        .where(SalaryAdjustment.employee_id == employee_id)
        .order_by(SalaryAdjustment.effective_date.desc(), SalaryAdjustment.id.desc())
    )
    return list(db.execute(stmt).scalars().all())
