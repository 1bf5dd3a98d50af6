# backend/hrdash/db.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from hrdash.config import get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()

# Upper bound of the Integer primary keys (32-bit signed on Postgres)
MAX_DB_ID = 2_147_483_647


def in_id_range(value: int) -> bool:
    return 1 <= value <= MAX_DB_ID


def make_engine(url: str, *, echo: bool = False, **kwargs) -> Engine:
    """Build an engine; SQLite gets thread-sharing and enforced foreign keys."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)

    engine = create_engine(url, echo=echo, **kwargs)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _sqlite_fk_pragma(dbapi_conn, _record):  # pragma: no cover - driver hook
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

    return engine


_settings = get_settings()
engine = make_engine(_settings.database_url, echo=_settings.sql_echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create all tables (dev/tests). Production schema goes through Alembic."""
    import hrdash.models  # noqa: F401  # register mappers

    target = bind or engine
    logger.info("init_db: creating tables on %s", target.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=target)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
