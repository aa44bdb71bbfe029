"""
Configuration helpers for the ledger backend.

Routers/services read settings through ``get_settings()`` instead of
fetching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

SEED_KEY_STYLES = ("identity", "indexed")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    log_file: str
    seed_key_style: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _choice(value: str | None, allowed: tuple[str, ...], default: str) -> str:
        candidate = (value or "").strip().lower()
        return candidate if candidate in allowed else default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./employee_office.db").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
        seed_key_style=_choice(os.getenv("SEED_KEY_STYLE"), SEED_KEY_STYLES, "identity"),
    )
