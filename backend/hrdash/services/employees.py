# backend/hrdash/services/employees.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hrdash.db import in_id_range, utcnow
from hrdash.errors import ConflictError, NotFoundError
from hrdash.models.employee import Employee
from hrdash.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)


def _commit_unique(db: Session, what: str) -> None:
    """Commit; a unique-constraint violation becomes ConflictError."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(f"{what} conflicts with an existing employee (employee_id or email)") from exc


def require_employee(db: Session, employee_id: int) -> Employee:
    """Existence check used before every write that references an employee."""
    emp = db.get(Employee, employee_id) if in_id_range(employee_id) else None
    if emp is None:
        raise NotFoundError(f"Employee with id {employee_id} not found")
    return emp


def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    emp = Employee(
        name=data.name,
        employee_id=data.employee_id,
        email=str(data.email),
        department=data.department,
        position=data.position,
        hire_date=data.hire_date,
    )
    db.add(emp)
    _commit_unique(db, f"Employee {data.employee_id}")
    db.refresh(emp)
    logger.info("employee created id=%s code=%s", emp.id, emp.employee_id)
    return emp


def get_employee(db: Session, employee_id: int) -> Optional[Employee]:
    # ids the key column cannot hold simply do not exist
    if not in_id_range(employee_id):
        return None
    return db.get(Employee, employee_id)


def list_employees(db: Session) -> List[Employee]:
    return list(db.execute(select(Employee).order_by(Employee.id.asc())).scalars().all())


def update_employee(db: Session, data: EmployeeUpdate) -> Employee:
    emp = require_employee(db, data.id)

    changes = data.changes()
    if "email" in changes:
        changes["email"] = str(changes["email"])
    for field, value in changes.items():
        setattr(emp, field, value)
    emp.updated_at = utcnow()

    _commit_unique(db, f"Employee {data.id}")
    db.refresh(emp)
    logger.info("employee updated id=%s fields=%s", emp.id, sorted(changes))
    return emp
