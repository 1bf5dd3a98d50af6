# tests/test_promotion_schedule.py
import time
from datetime import datetime

import pytest

from hrdash.config import get_settings


def _ts(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _schedule(employee_id, **overrides):
    payload = {
        "employee_id": employee_id,
        "current_position": "Senior Developer",
        "target_position": "Lead Developer",
        "current_salary": 75000,
        "target_salary": 90000,
        "scheduled_date": "2030-06-01T00:00:00Z",
        "notes": "Promotion due to excellent performance",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def schedule(client, make_employee):
    emp = make_employee()
    r = client.post("/createPromotionSchedule", json=_schedule(emp["id"]))
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture()
def permissive(monkeypatch):
    monkeypatch.setenv("STRICT_STATUS_TRANSITIONS", "false")
    get_settings.cache_clear()
    yield
    monkeypatch.delenv("STRICT_STATUS_TRANSITIONS", raising=False)
    get_settings.cache_clear()


def test_create_defaults_to_pending(schedule):
    assert schedule["status"] == "pending"
    assert schedule["current_salary"] == 75000
    assert schedule["target_salary"] == 90000
    assert schedule["notes"] == "Promotion due to excellent performance"
    assert schedule["created_at"] and schedule["updated_at"]


def test_create_with_explicit_status(client, make_employee):
    emp = make_employee()
    r = client.post("/createPromotionSchedule", json=_schedule(emp["id"], status="approved"))
    assert r.status_code == 201
    assert r.json()["status"] == "approved"


def test_create_unknown_employee_is_not_found(client):
    r = client.post("/createPromotionSchedule", json=_schedule(999999))
    assert r.status_code == 404


def test_create_rejects_unknown_status(client, make_employee):
    emp = make_employee()
    r = client.post("/createPromotionSchedule", json=_schedule(emp["id"], status="on_hold"))
    assert r.status_code == 422


def test_update_with_only_id_touches_updated_at_only(client, schedule):
    time.sleep(0.01)
    r = client.post("/updatePromotionSchedule", json={"id": schedule["id"]})
    assert r.status_code == 200, r.text
    updated = r.json()

    assert _ts(updated["updated_at"]) > _ts(schedule["updated_at"])
    for key, value in schedule.items():
        if key != "updated_at":
            assert updated[key] == value, key


def test_update_changes_only_supplied_fields(client, schedule):
    r = client.post(
        "/updatePromotionSchedule",
        json={"id": schedule["id"], "target_position": "Engineering Manager", "target_salary": 105000},
    )
    updated = r.json()
    assert updated["target_position"] == "Engineering Manager"
    assert updated["target_salary"] == 105000
    assert updated["scheduled_date"] == schedule["scheduled_date"]
    assert updated["notes"] == schedule["notes"]
    assert updated["status"] == "pending"


def test_update_explicit_null_clears_notes(client, schedule):
    updated = client.post("/updatePromotionSchedule", json={"id": schedule["id"], "notes": None}).json()
    assert updated["notes"] is None


def test_update_ignores_immutable_fields(client, schedule):
    r = client.post(
        "/updatePromotionSchedule",
        json={"id": schedule["id"], "current_position": "Intern", "current_salary": 1, "employee_id": 42},
    )
    assert r.status_code == 200
    updated = r.json()
    assert updated["current_position"] == schedule["current_position"]
    assert updated["current_salary"] == schedule["current_salary"]
    assert updated["employee_id"] == schedule["employee_id"]


def test_update_unknown_schedule_is_not_found(client):
    r = client.post("/updatePromotionSchedule", json={"id": 999999, "status": "approved"})
    assert r.status_code == 404


def test_update_rejects_null_status(client, schedule):
    r = client.post("/updatePromotionSchedule", json={"id": schedule["id"], "status": None})
    assert r.status_code == 422


def test_lifecycle_pending_approved_completed(client, schedule):
    sid = schedule["id"]
    assert client.post("/updatePromotionSchedule", json={"id": sid, "status": "approved"}).json()["status"] == "approved"
    assert client.post("/updatePromotionSchedule", json={"id": sid, "status": "completed"}).json()["status"] == "completed"


@pytest.mark.parametrize("path", [["cancelled"], ["approved", "cancelled"]])
def test_cancel_from_pending_or_approved(client, schedule, path):
    for status in path:
        r = client.post("/updatePromotionSchedule", json={"id": schedule["id"], "status": status})
        assert r.status_code == 200, r.text
    assert r.json()["status"] == "cancelled"


@pytest.mark.parametrize(
    "path, illegal",
    [
        (["approved", "completed"], "pending"),
        (["cancelled"], "approved"),
        ([], "completed"),
        (["approved"], "pending"),
    ],
)
def test_illegal_transitions_are_rejected(client, schedule, path, illegal):
    for status in path:
        assert client.post("/updatePromotionSchedule", json={"id": schedule["id"], "status": status}).status_code == 200

    r = client.post("/updatePromotionSchedule", json={"id": schedule["id"], "status": illegal})
    assert r.status_code == 409
    assert r.json()["error"] == "invalid_transition"

    rows = client.get("/getAllPromotionSchedules").json()
    assert rows[0]["status"] == (path[-1] if path else "pending")


def test_resending_current_status_is_allowed(client, schedule):
    r = client.post("/updatePromotionSchedule", json={"id": schedule["id"], "status": "pending"})
    assert r.status_code == 200


def test_permissive_mode_allows_any_transition(client, schedule, permissive):
    sid = schedule["id"]
    client.post("/updatePromotionSchedule", json={"id": sid, "status": "completed"})
    r = client.post("/updatePromotionSchedule", json={"id": sid, "status": "pending"})
    assert r.status_code == 200
    assert r.json()["status"] == "pending"


def test_get_all_sorted_by_scheduled_date(client, make_employee):
    emp = make_employee()
    for d in ("2031-01-01T00:00:00Z", "2029-05-01T00:00:00Z", "2030-03-01T00:00:00Z"):
        client.post("/createPromotionSchedule", json=_schedule(emp["id"], scheduled_date=d))

    rows = client.get("/getAllPromotionSchedules").json()
    assert [r["scheduled_date"][:10] for r in rows] == ["2029-05-01", "2030-03-01", "2031-01-01"]


def test_get_all_empty(client):
    assert client.get("/getAllPromotionSchedules").json() == []


def test_transition_table():
    from hrdash.models.promotion_schedule import PromotionStatus as S
    from hrdash.services.promotion_schedule import can_transition

    assert can_transition(S.pending, S.approved)
    assert can_transition(S.pending, S.cancelled)
    assert can_transition(S.approved, S.completed)
    assert can_transition(S.approved, S.cancelled)
    assert not can_transition(S.pending, S.completed)
    assert not can_transition(S.completed, S.pending)
    assert not can_transition(S.cancelled, S.approved)
    assert all(can_transition(s, s) for s in S)


def test_ids_beyond_key_range_are_rejected(client, schedule):
    r = client.post("/createPromotionSchedule", json=_schedule(10**20))
    assert r.status_code == 422
    r = client.post("/updatePromotionSchedule", json={"id": 10**20, "status": "approved"})
    assert r.status_code == 422


def test_target_salary_outside_numeric_12_2_is_rejected(client, schedule):
    r = client.post(
        "/updatePromotionSchedule", json={"id": schedule["id"], "target_salary": 10_000_000_000}
    )
    assert r.status_code == 422
