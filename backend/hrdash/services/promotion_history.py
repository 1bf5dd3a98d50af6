# backend/hrdash/services/promotion_history.py
"""
Promotion history is an append-only ledger: create and list, nothing else.
Reads for an unknown employee return an empty list rather than an error.
"""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from hrdash.db import in_id_range
from hrdash.models.promotion_history import PromotionHistory
from hrdash.schemas.promotion_history import PromotionHistoryCreate
from hrdash.services.employees import require_employee

logger = logging.getLogger(__name__)


def create_promotion_history(db: Session, data: PromotionHistoryCreate) -> PromotionHistory:
    require_employee(db, data.employee_id)

    row = PromotionHistory(**data.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("promotion history recorded id=%s employee=%s", row.id, row.employee_id)
    return row


def list_promotion_history(db: Session, employee_id: int) -> List[PromotionHistory]:
    if not in_id_range(employee_id):
        return []
    stmt = (
        select(PromotionHistory)
        .where(PromotionHistory.employee_id == employee_id)
        .order_by(PromotionHistory.promotion_date.desc(), PromotionHistory.id.desc())
    )
    return list(db.execute(stmt).scalars().all())
