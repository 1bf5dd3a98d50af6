# backend/hrdash/config.py
"""
Runtime settings, read once from the environment (.env is loaded first).

Keys:
- DATABASE_URL               SQLAlchemy URL (default: local SQLite file)
- SQL_ECHO                   echo SQL statements (default: false)
- LOG_LEVEL                  root level for the hrdash logger (default: INFO)
- CORS_ORIGINS               comma-separated list of allowed origins
- STRICT_STATUS_TRANSITIONS  reject illegal promotion status moves (default: true)
- DEFAULT_LOOKAHEAD_DAYS     window for upcoming promotions, positive (default: 30)
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Tuple

from dotenv import load_dotenv

from hrdash import __version__

load_dotenv()

DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost:3000", "http://127.0.0.1:3000",
    "http://localhost:5173", "http://127.0.0.1:5173",
)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if not raw:
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./hrdash.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    strict_status_transitions: bool = True
    default_lookahead_days: int = 30
    app_name: str = "HR Promotions Dashboard"
    app_version: str = __version__

    def __post_init__(self) -> None:
        if self.default_lookahead_days <= 0:
            raise ValueError(
                f"DEFAULT_LOOKAHEAD_DAYS must be a positive integer, got {self.default_lookahead_days}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL") or cls.database_url,
            sql_echo=_env_bool("SQL_ECHO", False),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            strict_status_transitions=_env_bool("STRICT_STATUS_TRANSITIONS", True),
            default_lookahead_days=_env_int("DEFAULT_LOOKAHEAD_DAYS", 30),
            app_name=os.getenv("APP_NAME", cls.app_name),
            app_version=os.getenv("APP_VERSION", __version__),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings singleton; call ``get_settings.cache_clear()`` after changing env in tests."""
    return Settings.from_env()
