# backend/hrdash/api/salary_adjustments.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from hrdash.db import get_db
from hrdash.schemas.salary_adjustment import SalaryAdjustmentCreate, SalaryAdjustmentRead
from hrdash.services import salary_adjustments as svc

router = APIRouter(tags=["Salary adjustments"])
logger = logging.getLogger(__name__)

CREATE_EXAMPLES: Dict[str, Dict[str, Any]] = {
    "derived_percentage": {
        "summary": "Percentage derived from the salaries",
        "value": {
            "employee_id": 1,
            "previous_salary": 100000,
            "new_salary": 110000,
            "adjustment_type": "annual_increase",
            "effective_date": "2024-01-01T00:00:00Z",
        },
    },
    "explicit_percentage": {
        "summary": "Explicit percentage",
        "value": {
            "employee_id": 1,
            "previous_salary": 90000,
            "new_salary": 95000,
            "adjustment_type": "performance",
            "adjustment_percentage": 5.5,
            "effective_date": "2024-07-01T00:00:00Z",
            "notes": "Mid-year review",
        },
    },
}


@router.post(
    "/createSalaryAdjustment",
    response_model=SalaryAdjustmentRead,
    status_code=status.HTTP_201_CREATED,
)
def create_salary_adjustment(
    payload: SalaryAdjustmentCreate = Body(..., openapi_examples=CREATE_EXAMPLES),
    db: Session = Depends(get_db),
) -> SalaryAdjustmentRead:
    logger.info(
        "createSalaryAdjustment employee=%s type=%s", payload.employee_id, payload.adjustment_type.value
    )
    return svc.create_salary_adjustment(db, payload)


@router.get("/getSalaryAdjustmentsByEmployee", response_model=List[SalaryAdjustmentRead])
def get_salary_adjustments_by_employee(
    employee_id: int = Query(...),
    db: Session = Depends(get_db),
) -> List[SalaryAdjustmentRead]:
    return svc.list_salary_adjustments(db, employee_id)
