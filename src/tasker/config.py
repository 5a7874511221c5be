# src/tasker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per process, built at the entry point and passed down.
- The store address, database and collection names are configuration, not code.
- Nothing here touches the network or the filesystem except reading .env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKER"

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_DATABASE = "tasker"
DEFAULT_COLLECTION = "task"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    log_level: str
    log_file_enabled: bool
    data_dir: Path

    # ---- Document store ----
    mongo_uri: str
    database: str
    collection: str
    server_timeout_ms: int | None

    # ---- Presentation ----
    color: bool

    @property
    def log_file_path(self) -> Path:
        return self.data_dir / "tasker.log"

    @staticmethod
    def from_env() -> "Settings":
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), True)
        data_dir = _env_path(_k("DATA_DIR"), Path.home() / ".local" / "share" / "tasker")

        # Accept the conventional MONGO_URI as a fallback for shared .env files.
        mongo_uri = (
            _first_env(_k("MONGO_URI"), "MONGO_URI", default=DEFAULT_MONGO_URI)
            or DEFAULT_MONGO_URI
        ).strip()
        database = _env(_k("DATABASE"), DEFAULT_DATABASE).strip() or DEFAULT_DATABASE
        collection = _env(_k("COLLECTION"), DEFAULT_COLLECTION).strip() or DEFAULT_COLLECTION
        server_timeout_ms = _env_optional_int(_k("SERVER_TIMEOUT_MS"))

        color = _env_bool(_k("COLOR"), True)

        return Settings(
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            data_dir=data_dir,
            mongo_uri=mongo_uri,
            database=database,
            collection=collection,
            server_timeout_ms=server_timeout_ms,
            color=color,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load .env (without overriding the real environment) and build Settings once."""
    load_dotenv(override=False)
    return Settings.from_env()
