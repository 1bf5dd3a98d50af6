# tests/conftest.py
"""
Each test gets a fresh in-memory SQLite database (StaticPool so the
TestClient's worker threads share one connection) wired in through the
get_db dependency override.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from hrdash.db import Base, get_db, make_engine  # noqa: E402
from hrdash.main import app  # noqa: E402


@pytest.fixture()
def engine():
    eng = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def db(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


EMPLOYEE = {
    "name": "John Doe",
    "employee_id": "EMP001",
    "email": "john.doe@company.com",
    "department": "Engineering",
    "position": "Software Engineer",
    "hire_date": "2022-01-15T00:00:00Z",
}


@pytest.fixture()
def make_employee(client):
    """POST /createEmployee with overrides; returns the JSON body."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        payload = dict(EMPLOYEE, employee_id=f"EMP{n:03d}", email=f"employee{n}@company.com")
        payload.update(overrides)
        r = client.post("/createEmployee", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _make
