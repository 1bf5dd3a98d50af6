# tests/test_salary_adjustments.py
from decimal import Decimal

import pytest

from hrdash.models.salary_adjustment import SalaryAdjustment
from hrdash.services.salary_adjustments import adjustment_percentage


def _adjustment(employee_id, **overrides):
    payload = {
        "employee_id": employee_id,
        "previous_salary": 100000,
        "new_salary": 110000,
        "adjustment_type": "annual_increase",
        "effective_date": "2024-01-01T00:00:00Z",
    }
    payload.update(overrides)
    return payload


@pytest.mark.parametrize(
    "prev, new, expected",
    [
        (100000, 110000, Decimal("10.00")),
        (75000, 80000, Decimal("6.67")),
        (90000, 85000, Decimal("-5.56")),
        (50000, 50000, Decimal("0.00")),
        ("80000.50", "88000.55", Decimal("10.00")),
    ],
)
def test_adjustment_percentage(prev, new, expected):
    assert adjustment_percentage(prev, new) == expected


def test_adjustment_percentage_zero_previous_is_none():
    assert adjustment_percentage(0, 50000) is None
    assert adjustment_percentage(Decimal("0.00"), 1) is None


def test_percentage_derived_when_absent(client, make_employee):
    emp = make_employee()
    r = client.post("/createSalaryAdjustment", json=_adjustment(emp["id"]))
    assert r.status_code == 201, r.text
    row = r.json()
    assert row["adjustment_percentage"] == 10
    assert row["previous_salary"] == 100000
    assert row["new_salary"] == 110000
    assert row["adjustment_type"] == "annual_increase"
    assert row["notes"] is None


def test_percentage_null_when_previous_salary_zero(client, make_employee):
    emp = make_employee()
    r = client.post("/createSalaryAdjustment", json=_adjustment(emp["id"], previous_salary=0))
    assert r.status_code == 201, r.text
    assert r.json()["adjustment_percentage"] is None


def test_explicit_percentage_is_kept(client, make_employee):
    emp = make_employee()
    r = client.post(
        "/createSalaryAdjustment",
        json=_adjustment(emp["id"], adjustment_percentage=12.5, adjustment_type="performance"),
    )
    assert r.status_code == 201
    assert r.json()["adjustment_percentage"] == 12.5


def test_rounding_to_two_places(client, make_employee):
    emp = make_employee()
    r = client.post(
        "/createSalaryAdjustment",
        json=_adjustment(emp["id"], previous_salary=75000, new_salary=80000, adjustment_type="promotion"),
    )
    assert r.json()["adjustment_percentage"] == 6.67


def test_unknown_employee_is_not_found(client):
    r = client.post("/createSalaryAdjustment", json=_adjustment(999999))
    assert r.status_code == 404


def test_invalid_adjustment_type_is_rejected(client, make_employee):
    emp = make_employee()
    r = client.post("/createSalaryAdjustment", json=_adjustment(emp["id"], adjustment_type="bonus"))
    assert r.status_code == 422


def test_list_is_latest_effective_date_first(client, make_employee):
    emp = make_employee()
    for d in ("2023-01-01T00:00:00Z", "2024-01-01T00:00:00Z", "2022-01-01T00:00:00Z"):
        client.post("/createSalaryAdjustment", json=_adjustment(emp["id"], effective_date=d))

    rows = client.get("/getSalaryAdjustmentsByEmployee", params={"employee_id": emp["id"]}).json()
    assert [r["effective_date"][:10] for r in rows] == ["2024-01-01", "2023-01-01", "2022-01-01"]


def test_list_unknown_employee_is_empty(client):
    r = client.get("/getSalaryAdjustmentsByEmployee", params={"employee_id": 424242})
    assert r.status_code == 200
    assert r.json() == []


def test_create_with_employee_id_beyond_key_range_is_rejected(client):
    r = client.post("/createSalaryAdjustment", json=_adjustment(10**20))
    assert r.status_code == 422


def test_list_with_employee_id_beyond_key_range_is_empty(client):
    r = client.get("/getSalaryAdjustmentsByEmployee", params={"employee_id": 10**20})
    assert r.status_code == 200
    assert r.json() == []


def test_raise_above_one_thousand_percent_is_stored(client, make_employee):
    emp = make_employee()
    r = client.post(
        "/createSalaryAdjustment",
        json=_adjustment(emp["id"], previous_salary=10000, new_salary=200000, adjustment_type="promotion"),
    )
    assert r.status_code == 201, r.text
    assert r.json()["adjustment_percentage"] == 1900


def test_largest_derived_percentage_fits_the_column():
    column = SalaryAdjustment.__table__.c.adjustment_percentage.type
    widest = adjustment_percentage(Decimal("-0.01"), Decimal("9999999999.99"))
    digits = len(widest.as_tuple().digits)
    assert column.scale == 2
    assert digits <= column.precision


def test_salary_outside_numeric_12_2_is_rejected(client, make_employee):
    emp = make_employee()
    r = client.post("/createSalaryAdjustment", json=_adjustment(emp["id"], new_salary=10_000_000_000))
    assert r.status_code == 422
    r = client.post("/createSalaryAdjustment", json=_adjustment(emp["id"], adjustment_percentage="1.005"))
    assert r.status_code == 422


def test_negative_half_cent_ties_round_away_from_zero():
    assert adjustment_percentage(200, "199.99") == Decimal("-0.01")
    assert adjustment_percentage(200, "200.01") == Decimal("0.01")
