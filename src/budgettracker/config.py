"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

ENV_PREFIX = "BUDGET_TRACKER_"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = _env(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = _env(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "BudgetTracker"
    DB_FILENAME = "budgettracker.db"
    LOCAL_STORE_FILENAME = "local_store.json"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = _env("SECRET_KEY", "replace-me")
        self.DEV_MODE = _env_bool("DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.DATABASE_URL = _env("DATABASE_URL") or self._build_sqlite_url()
        self.LOCAL_STORE_PATH = Path(
            _env("LOCAL_STORE") or self.DATA_DIR / self.LOCAL_STORE_FILENAME
        ).expanduser()
        self.LOG_LEVEL = (_env("LOG_LEVEL", "INFO") or "INFO").upper()
        self.ALERT_THRESHOLD = _env_float("ALERT_THRESHOLD", 80.0)
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError(f"{ENV_PREFIX}SECRET_KEY must be set in non-dev mode.")
        if not 0 < self.ALERT_THRESHOLD <= 100:
            raise ValueError(f"{ENV_PREFIX}ALERT_THRESHOLD must be within (0, 100].")

    def _resolve_data_dir(self) -> Path:
        """Return the directory holding the SQLite file, local store and logs."""

        path = Path(_env("DATA_DIR", "instance") or "instance").expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    @property
    def uses_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.uses_sqlite:
            return {"connect_args": {"check_same_thread": False}}
        # Hosted databases drop idle connections; ping before handing one out.
        return {"pool_pre_ping": True, "connect_args": {"connect_timeout": 5}}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite."""

    TESTING = True
