# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_list.config import Settings
from todo_list.tasks.task_service import TaskService
from todo_list.tasks.task_store import TaskStore


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "todo.json"


@pytest.fixture()
def settings(tmp_path: Path, db_path: Path) -> Settings:
    """
    Settings pointing at a per-test document.

    Built directly instead of via get_settings() so the real environment
    and any local .env never leak into tests.
    """
    return Settings(
        app_name="todo-test",
        log_level="DEBUG",
        log_file=None,
        data_dir=tmp_path,
        db_path=db_path,
        json_indent=4,
    )


@pytest.fixture()
def store(settings: Settings) -> TaskStore:
    return TaskStore(settings.store_config())


@pytest.fixture()
def service(store: TaskStore) -> TaskService:
    """Service over a real file-backed store (the JSON format is part of what we test)."""
    return TaskService(store)

