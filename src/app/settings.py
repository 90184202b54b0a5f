# src/app/settings.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# src/app/settings.py -> repository root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_DB = DATA_DIR / "inventory.db"
DEFAULT_REPORTS_DIR = DATA_DIR / "reports"


class Settings(BaseSettings):
    """
    Inventory configuration. ``APP_*`` environment variables win over
    ``data/.env``, which wins over the defaults here.
    """

    model_config = SettingsConfigDict(
        env_file=str(DATA_DIR / ".env"),
        env_prefix="APP_",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Log at DEBUG regardless of log_level")
    log_level: str = Field(default="INFO", description="Root logger level name")

    db_path: Path = Field(default=DEFAULT_DB, description="Inventory database file")
    reports_dir: Path = Field(default=DEFAULT_REPORTS_DIR, description="Where HTML reports are written")
    report_window_days: int = Field(
        default=7, ge=1, description="Days covered by the recently-updated report"
    )

    @field_validator("db_path", "reports_dir", mode="before")
    @classmethod
    def _as_path(cls, v):
        if isinstance(v, str | Path):
            return Path(str(v)).expanduser()
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        name = v.strip().upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {v!r}")
        return name

    def ensure_directories(self) -> None:
        """Create the database's parent directory and the reports directory."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.reports_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings; directories are created on first call."""
    s = Settings()
    s.ensure_directories()
    return s
