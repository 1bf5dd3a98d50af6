# backend/hrdash/api/system.py
from __future__ import annotations

from fastapi import APIRouter
from sqlalchemy import text

from hrdash.config import get_settings
from hrdash.db import engine, utcnow

router = APIRouter(tags=["ops"])


def _db_driver_from_url(url: str | None) -> str | None:
    if not url or "://" not in url:
        return None
    scheme = url.split("://", 1)[0]  # e.g., "postgresql+psycopg2"
    if "+" in scheme:
        return scheme.split("+", 1)[1]  # "psycopg2"
    return scheme


@router.get("/healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": utcnow().isoformat()}


@router.get("/health")
def health():
    """Liveness check with a lightweight DB probe."""
    db = {"status": "ok", "driver": _db_driver_from_url(get_settings().database_url)}
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        db["status"] = f"error: {type(e).__name__}"

    return {"status": "ok", "time": utcnow().isoformat(), "db": db}


@router.get("/version")
def version():
    settings = get_settings()
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "db_driver": _db_driver_from_url(settings.database_url),
    }
