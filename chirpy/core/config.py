"""
Configuration helpers for the Chirpy backend.

Exposes a Settings object that reads environment variables (database path,
JWT secret, Polka API key, logging level) so that routers/services do not
fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import logging
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    db_path: str
    jwt_secret: str
    polka_key: str
    jwt_default_ttl_seconds: int
    static_dir: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        db_path=os.getenv("DB_PATH", "database.json"),
        jwt_secret=os.getenv("JWT_SECRET", ""),
        polka_key=os.getenv("POLKA_KEY", ""),
        jwt_default_ttl_seconds=_int(os.getenv("JWT_DEFAULT_TTL_SECONDS", "86400"), 86400),
        static_dir=os.getenv("STATIC_DIR", "."),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
