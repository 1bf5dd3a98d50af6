# backend/hrdash/api/promotion_history.py
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from hrdash.db import get_db
from hrdash.schemas.promotion_history import PromotionHistoryCreate, PromotionHistoryRead
from hrdash.services import promotion_history as svc

router = APIRouter(tags=["Promotion history"])
logger = logging.getLogger(__name__)


@router.post(
    "/createPromotionHistory",
    response_model=PromotionHistoryRead,
    status_code=status.HTTP_201_CREATED,
)
def create_promotion_history(
    payload: PromotionHistoryCreate, db: Session = Depends(get_db)
) -> PromotionHistoryRead:
    logger.info("createPromotionHistory employee=%s", payload.employee_id)
    return svc.create_promotion_history(db, payload)


@router.get("/getPromotionHistoryByEmployee", response_model=List[PromotionHistoryRead])
def get_promotion_history_by_employee(
    employee_id: int = Query(...),
    db: Session = Depends(get_db),
) -> List[PromotionHistoryRead]:
    return svc.list_promotion_history(db, employee_id)
