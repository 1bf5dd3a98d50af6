# backend/scripts/smoke_promotions.py
"""
Live smoke run against a running API (BASE_URL, default http://127.0.0.1:8000).

1) Creates a uniquely-coded employee (reruns don't collide)
2) Schedules a promotion 10 days out
3) Checks it shows up in getUpcomingPromotions
4) Approves and completes it
5) Checks it dropped out of the upcoming list
6) Prints a compact JSON summary
"""
from __future__ import annotations

import json
import os
import uuid
from datetime import datetime, timedelta, timezone

import requests

BASE = os.getenv("BASE_URL", "http://127.0.0.1:8000")
TIMEOUT = 10


def _post(proc: str, payload: dict) -> dict:
    r = requests.post(f"{BASE}/{proc}", json=payload, timeout=TIMEOUT)
    r.raise_for_status()
    return r.json()


def _get(proc: str, **params) -> object:
    r = requests.get(f"{BASE}/{proc}", params=params, timeout=TIMEOUT)
    r.raise_for_status()
    return r.json()


def main():
    tag = uuid.uuid4().hex[:8]
    now = datetime.now(timezone.utc)

    emp = _post("createEmployee", {
        "name": f"Smoke {tag}",
        "employee_id": f"SMOKE-{tag}",
        "email": f"smoke.{tag}@example.com",
        "department": "QA",
        "position": "QA Engineer",
        "hire_date": (now - timedelta(days=400)).isoformat(),
    })

    sched = _post("createPromotionSchedule", {
        "employee_id": emp["id"],
        "current_position": "QA Engineer",
        "target_position": "Senior QA Engineer",
        "current_salary": 60000,
        "target_salary": 68000,
        "scheduled_date": (now + timedelta(days=10)).isoformat(),
    })

    upcoming_before = [u["id"] for u in _get("getUpcomingPromotions", days_ahead=30)]

    _post("updatePromotionSchedule", {"id": sched["id"], "status": "approved"})
    done = _post("updatePromotionSchedule", {"id": sched["id"], "status": "completed"})

    upcoming_after = [u["id"] for u in _get("getUpcomingPromotions", days_ahead=30)]

    summary = {
        "employee_id": emp["id"],
        "schedule_id": sched["id"],
        "listed_before": sched["id"] in upcoming_before,
        "final_status": done["status"],
        "listed_after": sched["id"] in upcoming_after,
    }
    print(json.dumps(summary, indent=2))
    ok = summary["listed_before"] and not summary["listed_after"] and done["status"] == "completed"
    raise SystemExit(0 if ok else 1)


if __name__ == "__main__":
    main()
