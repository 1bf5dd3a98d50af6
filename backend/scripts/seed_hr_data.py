# backend/scripts/seed_hr_data.py
"""
Seed demo HR data through the service layer.

Creates a handful of employees across departments, each with a first
recorded position, one or two salary adjustments and (for some) a scheduled
promotion spread around today so the "upcoming" view has overdue, near and
far rows.

Usage (from backend/):
  python scripts/seed_hr_data.py --employees 12 --dry-run
  python scripts/seed_hr_data.py --employees 12 --db-url sqlite:///./hrdash.db --create-tables

Notes:
- Employee codes are SEED-0001.. so reruns skip rows that already exist.
- No extra pip deps; names come from built-in lists.
"""
from __future__ import annotations

import argparse
import json
import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
import sys
from typing import Any, Dict, List

# --- PATH SHIM: ensure 'hrdash' package is importable when running this script ---
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from sqlalchemy import select  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from hrdash.db import init_db, make_engine  # noqa: E402
from hrdash.config import get_settings  # noqa: E402
from hrdash.models import Employee  # noqa: E402
from hrdash.models.salary_adjustment import AdjustmentType  # noqa: E402
from hrdash.schemas.employee import EmployeeCreate  # noqa: E402
from hrdash.schemas.promotion_history import PromotionHistoryCreate  # noqa: E402
from hrdash.schemas.promotion_schedule import PromotionScheduleCreate  # noqa: E402
from hrdash.schemas.salary_adjustment import SalaryAdjustmentCreate  # noqa: E402
from hrdash.services.employees import create_employee  # noqa: E402
from hrdash.services.promotion_history import create_promotion_history  # noqa: E402
from hrdash.services.promotion_schedule import create_promotion_schedule  # noqa: E402
from hrdash.services.salary_adjustments import create_salary_adjustment, q2  # noqa: E402

FIRST_NAMES = ["Maria", "Jose", "Ana", "Carlos", "Liza", "Paolo", "Grace", "Miguel", "Rina", "Tomas"]
LAST_NAMES = ["Santos", "Reyes", "Cruz", "Garcia", "Mendoza", "Torres", "Flores", "Ramos"]

# department -> career ladder
LADDERS: Dict[str, List[str]] = {
    "Engineering": ["Software Engineer", "Senior Software Engineer", "Lead Engineer", "Engineering Manager"],
    "Finance": ["Accountant", "Senior Accountant", "Finance Manager"],
    "Marketing": ["Marketing Associate", "Marketing Specialist", "Marketing Manager"],
    "Operations": ["Operations Analyst", "Operations Lead", "Operations Manager"],
}
BASE_SALARY = {"Engineering": 70000, "Finance": 55000, "Marketing": 50000, "Operations": 48000}

parser = argparse.ArgumentParser(description="Seed HR dashboard demo data.")
parser.add_argument("--employees", type=int, default=10)
parser.add_argument("--db-url", dest="db_url", help="SQLAlchemy URL (defaults to DATABASE_URL)")
parser.add_argument("--create-tables", action="store_true", help="create_all before seeding (dev only)")
parser.add_argument("--seed", dest="rng_seed", type=int, default=42)
parser.add_argument("--dry-run", dest="dry_run", action="store_true")


def _plan(n: int, rng: random.Random) -> List[Dict[str, Any]]:
    now = datetime.now(timezone.utc).replace(microsecond=0)
    plan = []
    for i in range(1, n + 1):
        dept = rng.choice(sorted(LADDERS))
        ladder = LADDERS[dept]
        first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
        hire = now - timedelta(days=rng.randint(400, 2500))
        salary = q2(BASE_SALARY[dept] * (1 + rng.random() / 5))
        raise_pct = Decimal(rng.choice([3, 4, 5, 6, 8]))
        raised = q2(salary * (100 + raise_pct) / 100)

        item: Dict[str, Any] = {
            "employee": {
                "name": f"{first} {last}",
                "employee_id": f"SEED-{i:04d}",
                "email": f"{first}.{last}.{i}@example.com".lower(),
                "department": dept,
                "position": ladder[0],
                "hire_date": hire,
            },
            "history": {
                "previous_position": None,
                "new_position": ladder[0],
                "previous_salary": None,
                "new_salary": salary,
                "promotion_date": hire,
                "effective_date": hire,
                "notes": "Initial position",
            },
            "adjustment": {
                "previous_salary": salary,
                "new_salary": raised,
                "adjustment_type": AdjustmentType.annual_increase,
                "effective_date": hire + timedelta(days=365),
            },
            "schedule": None,
        }
        if rng.random() < 0.7:
            item["schedule"] = {
                "current_position": ladder[0],
                "target_position": ladder[1],
                "current_salary": raised,
                "target_salary": q2(raised * Decimal("1.12")),
                # -10..75 days: some overdue, some inside 30d, some beyond
                "scheduled_date": now + timedelta(days=rng.randint(-10, 75)),
                "status": rng.choice(["pending", "pending", "approved"]),
            }
        plan.append(item)
    return plan


def main() -> None:
    args = parser.parse_args()
    rng = random.Random(args.rng_seed)
    plan = _plan(args.employees, rng)

    if args.dry_run:
        print(json.dumps(plan, default=str, indent=2))
        return

    engine = make_engine(args.db_url or get_settings().database_url)
    if args.create_tables:
        init_db(engine)
    db = sessionmaker(bind=engine, autoflush=False, autocommit=False)()

    counts = {"employees": 0, "skipped": 0, "history": 0, "adjustments": 0, "schedules": 0}
    try:
        for item in plan:
            code = item["employee"]["employee_id"]
            exists = db.execute(select(Employee.id).where(Employee.employee_id == code)).first()
            if exists:
                counts["skipped"] += 1
                continue

            emp = create_employee(db, EmployeeCreate(**item["employee"]))
            counts["employees"] += 1

            create_promotion_history(db, PromotionHistoryCreate(employee_id=emp.id, **item["history"]))
            counts["history"] += 1

            create_salary_adjustment(db, SalaryAdjustmentCreate(employee_id=emp.id, **item["adjustment"]))
            counts["adjustments"] += 1

            if item["schedule"]:
                create_promotion_schedule(db, PromotionScheduleCreate(employee_id=emp.id, **item["schedule"]))
                counts["schedules"] += 1
    finally:
        db.close()

    print(json.dumps(counts, indent=2))


if __name__ == "__main__":
    main()
