# backend/hrdash/api/promotion_schedule.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from hrdash.db import get_db
from hrdash.schemas.promotion_schedule import (
    PromotionScheduleCreate,
    PromotionScheduleRead,
    PromotionScheduleUpdate,
)
from hrdash.services import promotion_schedule as svc

router = APIRouter(tags=["Promotion schedule"])
logger = logging.getLogger(__name__)


@router.post(
    "/createPromotionSchedule",
    response_model=PromotionScheduleRead,
    status_code=status.HTTP_201_CREATED,
)
def create_promotion_schedule(
    payload: PromotionScheduleCreate, db: Session = Depends(get_db)
) -> PromotionScheduleRead:
    logger.info(
        "createPromotionSchedule employee=%s status=%s", payload.employee_id, payload.status.value
    )
    return svc.create_promotion_schedule(db, payload)


@router.post("/updatePromotionSchedule", response_model=PromotionScheduleRead)
def update_promotion_schedule(
    payload: PromotionScheduleUpdate, db: Session = Depends(get_db)
) -> PromotionScheduleRead:
    logger.info("updatePromotionSchedule id=%s fields=%s", payload.id, sorted(payload.changes()))
    return svc.update_promotion_schedule(db, payload)


@router.get("/getAllPromotionSchedules", response_model=List[PromotionScheduleRead])
def get_all_promotion_schedules(db: Session = Depends(get_db)) -> List[PromotionScheduleRead]:
    return svc.list_promotion_schedules(db)


@router.get("/getUpcomingPromotions", response_model=List[PromotionScheduleRead])
def get_upcoming_promotions(
    days_ahead: Optional[int] = Query(
        None, gt=0, description="Lookahead window in days (default from settings, 30)"
    ),
    db: Session = Depends(get_db),
) -> List[PromotionScheduleRead]:
    return svc.list_upcoming_promotions(db, days_ahead)
