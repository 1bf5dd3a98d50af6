# backend/hrdash/api/employees.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from hrdash.db import get_db
from hrdash.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate
from hrdash.services import employees as svc

router = APIRouter(tags=["Employees"])
logger = logging.getLogger(__name__)


@router.post("/createEmployee", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
def create_employee(payload: EmployeeCreate, db: Session = Depends(get_db)) -> EmployeeRead:
    logger.info("createEmployee code=%s department=%s", payload.employee_id, payload.department)
    return svc.create_employee(db, payload)


@router.get("/getEmployees", response_model=List[EmployeeRead])
def get_employees(db: Session = Depends(get_db)) -> List[EmployeeRead]:
    return svc.list_employees(db)


@router.get("/getEmployeeById", response_model=Optional[EmployeeRead])
def get_employee_by_id(
    id: int = Query(..., description="Internal employee id"),
    db: Session = Depends(get_db),
) -> Optional[EmployeeRead]:
    # null, not 404: the one read that distinguishes "absent" from "error"
    return svc.get_employee(db, id)


@router.post("/updateEmployee", response_model=EmployeeRead)
def update_employee(payload: EmployeeUpdate, db: Session = Depends(get_db)) -> EmployeeRead:
    logger.info("updateEmployee id=%s fields=%s", payload.id, sorted(payload.changes()))
    return svc.update_employee(db, payload)
