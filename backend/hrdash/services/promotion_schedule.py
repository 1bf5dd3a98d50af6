# backend/hrdash/services/promotion_schedule.py
"""
Promotion schedule: the one mutable, status-tracked entity.

Lifecycle:
    pending  -> approved | cancelled
    approved -> completed | cancelled
    completed, cancelled: terminal

Re-sending the current status is always allowed. With
STRICT_STATUS_TRANSITIONS off, any status may be set (legacy behaviour).

Upcoming = scheduled_date <= now + days_ahead and status still open.
There is no lower bound, so overdue pending/approved rows stay visible.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Dict, FrozenSet, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from hrdash.config import get_settings
from hrdash.db import utcnow
from hrdash.errors import InvalidTransitionError, NotFoundError
from hrdash.models.promotion_schedule import OPEN_STATUSES, PromotionSchedule, PromotionStatus
from hrdash.schemas.promotion_schedule import PromotionScheduleCreate, PromotionScheduleUpdate
from hrdash.services.employees import require_employee

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: Dict[PromotionStatus, FrozenSet[PromotionStatus]] = {
    PromotionStatus.pending: frozenset({PromotionStatus.approved, PromotionStatus.cancelled}),
    PromotionStatus.approved: frozenset({PromotionStatus.completed, PromotionStatus.cancelled}),
    PromotionStatus.completed: frozenset(),
    PromotionStatus.cancelled: frozenset(),
}


def can_transition(current: PromotionStatus, requested: PromotionStatus) -> bool:
    return current == requested or requested in ALLOWED_TRANSITIONS[current]


def check_transition(
    current: PromotionStatus, requested: PromotionStatus, *, strict: Optional[bool] = None
) -> None:
    if strict is None:
        strict = get_settings().strict_status_transitions
    if strict and not can_transition(current, requested):
        raise InvalidTransitionError(current.value, requested.value)


def upcoming_cutoff(days_ahead: int, now: Optional[datetime] = None) -> datetime:
    """End of the lookahead window: now + days_ahead."""
    return (now or utcnow()) + timedelta(days=days_ahead)


# ------------------------------- Handlers --------------------------------- #

def create_promotion_schedule(db: Session, data: PromotionScheduleCreate) -> PromotionSchedule:
    require_employee(db, data.employee_id)

    row = PromotionSchedule(**data.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(
        "promotion scheduled id=%s employee=%s status=%s", row.id, row.employee_id, row.status.value
    )
    return row


def update_promotion_schedule(db: Session, data: PromotionScheduleUpdate) -> PromotionSchedule:
    row = db.get(PromotionSchedule, data.id)
    if row is None:
        raise NotFoundError(f"Promotion schedule with id {data.id} not found")

    changes = data.changes()
    if "status" in changes:
        check_transition(row.status, changes["status"])

    for field, value in changes.items():
        setattr(row, field, value)
    # always re-stamped, even when nothing else changed
    row.updated_at = utcnow()

    db.commit()
    db.refresh(row)
    logger.info(
        "promotion schedule updated id=%s fields=%s status=%s",
        row.id, sorted(changes), row.status.value,
    )
    return row


def list_promotion_schedules(db: Session) -> List[PromotionSchedule]:
    stmt = select(PromotionSchedule).order_by(
        PromotionSchedule.scheduled_date.asc(), PromotionSchedule.id.asc()
    )
    return list(db.execute(stmt).scalars().all())


def list_upcoming_promotions(
    db: Session, days_ahead: Optional[int] = None, *, now: Optional[datetime] = None
) -> List[PromotionSchedule]:
    if days_ahead is None:
        days_ahead = get_settings().default_lookahead_days
    if days_ahead <= 0:
        raise ValueError("days_ahead must be a positive integer")

    cutoff = upcoming_cutoff(days_ahead, now)
    stmt = (
        select(PromotionSchedule)
        .where(
            PromotionSchedule.scheduled_date <= cutoff,
            PromotionSchedule.status.in_(OPEN_STATUSES),
        )
        .order_by(PromotionSchedule.scheduled_date.asc(), PromotionSchedule.id.asc())
    )
    return list(db.execute(stmt).scalars().all())
