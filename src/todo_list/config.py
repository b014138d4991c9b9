# src/todo_list/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per invocation, built by get_settings().
- The task layer never reads the environment; it gets a StoreConfig.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .tasks.task_store import StoreConfig

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Storage ----
    data_dir: Path
    db_path: Path
    json_indent: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_optional_path(_k("LOG_FILE"))

        data_dir = _env_path(_k("DATA_DIR"), Path("."))
        db_path = _env_path(_k("DB_PATH"), data_dir / "todo.json")
        json_indent = max(0, _env_int(_k("JSON_INDENT"), 4))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            data_dir=data_dir,
            db_path=db_path,
            json_indent=json_indent,
        )

    def store_config(self) -> StoreConfig:
        return StoreConfig(db_path=self.db_path, indent=self.json_indent)


def get_settings(*, use_dotenv: bool = True) -> Settings:
    """Build settings from the environment; a local .env never overrides real vars."""
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
