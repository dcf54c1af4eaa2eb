"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a whole number, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "TagLedger"
    DB_FILENAME = "transactions.db"
    JWT_ALGORITHM = "HS256"
    SQLITE_PRAGMAS = {"foreign_keys": "on"}
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("TAGLEDGER_SECRET_KEY", "replace-me")
        self.JWT_SECRET = os.getenv("TAGLEDGER_JWT_SECRET") or self.SECRET_KEY
        self.TOKEN_TTL_DAYS = _env_int("TAGLEDGER_TOKEN_TTL_DAYS", 7)
        self.DEV_MODE = _env_bool("TAGLEDGER_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.DATABASE_URL = os.getenv("TAGLEDGER_DATABASE_URL", self._build_sqlite_url())
        self.FRONTEND_URL = os.getenv("TAGLEDGER_FRONTEND_URL", "http://localhost:3000")
        self.API_PREFIX = os.getenv("TAGLEDGER_API_PREFIX", "/api").rstrip("/")
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("TAGLEDGER_SECRET_KEY must be set in non-dev mode.")
        if self.TOKEN_TTL_DAYS <= 0:
            raise ValueError("TAGLEDGER_TOKEN_TTL_DAYS must be positive.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("TAGLEDGER_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite; never leaves dev mode."""

    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True
