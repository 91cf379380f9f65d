"""
Configuration helpers for the campus booking backend.

Settings are read from environment variables once and cached, so that
routers/services never fetch os.environ directly. Tests clear the cache with
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "data.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    public_base_url: str
    storage_backend: str
    data_file: Path
    database_url: str
    seed_resources: bool
    allow_double_booking: bool
    session_ttl_seconds: int
    login_rate_limit: int
    login_rate_window: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    data_file = (os.getenv("DATA_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/"),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        database_url=os.getenv("DATABASE_URL", ""),
        seed_resources=_bool(os.getenv("SEED_RESOURCES"), True),
        allow_double_booking=_bool(os.getenv("ALLOW_DOUBLE_BOOKING"), False),
        session_ttl_seconds=_int(os.getenv("SESSION_TTL_SECONDS", "86400"), 86400),
        login_rate_limit=_int(os.getenv("LOGIN_RATE_LIMIT", "10"), 10),
        login_rate_window=_int(os.getenv("LOGIN_RATE_WINDOW", "60"), 60),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
