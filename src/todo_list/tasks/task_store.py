# src/todo_list/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .task_errors import ParseError
from .task_models import Counter, Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Where and how the task document is written."""

    db_path: Path = Path("todo.json")
    indent: int = 4


class TaskStore:
    """
    JSON task store.

    One document holds both the counter and the task list:

        {"counter": 2, "tasks": [{"id": 1, "title": "...", "status": "todo"}]}

    Every write replaces the whole document through a temp file + os.replace,
    so tasks and counter are always updated together. There is no locking:
    two processes writing at once means last writer wins.
    """

    def __init__(self, config: StoreConfig | None = None) -> None:
        self._config = config or StoreConfig()
        self._db_path = Path(self._config.db_path)
        logger.debug("TaskStore ready db=%s", self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _read_document(self) -> dict[str, Any]:
        try:
            raw = self._db_path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("No document at %s, using defaults", self._db_path)
            return {}
        except UnicodeDecodeError as e:
            raise ParseError(self._db_path, f"not valid UTF-8 (byte {e.start})") from e

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(self._db_path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

        if not isinstance(data, dict):
            raise ParseError(self._db_path, f"expected an object, got {type(data).__name__}")
        return data

    def _tasks_from(self, doc: dict[str, Any]) -> list[Task]:
        raw_tasks = doc.get("tasks", [])
        if not isinstance(raw_tasks, list):
            raise ParseError(self._db_path, "'tasks' must be a list")
        try:
            return [Task.from_dict(item) for item in raw_tasks]
        except ValueError as e:
            raise ParseError(self._db_path, str(e)) from e

    def _counter_from(self, doc: dict[str, Any]) -> Counter:
        value = doc.get("counter", 0)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParseError(self._db_path, f"'counter' must be an integer, got {value!r}")
        return Counter(value)

    def _load_document(self) -> tuple[list[Task], Counter]:
        # both halves are checked on every load
        doc = self._read_document()
        return self._tasks_from(doc), self._counter_from(doc)

    def _write_document(self, tasks: Iterable[Task], counter: Counter) -> None:
        payload = {
            "counter": counter.value,
            "tasks": [t.to_dict() for t in tasks],
        }
        text = json.dumps(payload, ensure_ascii=False, indent=self._config.indent) + "\n"

        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._db_path.with_name(self._db_path.name + ".tmp")
        try:
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._db_path)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.debug(
            "Saved %d tasks counter=%d to %s", len(payload["tasks"]), counter.value, self._db_path
        )

    # ---- public API ----

    def load_tasks(self) -> list[Task]:
        tasks, _ = self._load_document()
        return tasks

    def load_counter(self) -> Counter:
        _, counter = self._load_document()
        return counter

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        """Overwrite the task list, keeping whatever counter is stored."""
        counter = self.load_counter()
        self._write_document(tasks, counter)

    def save_counter(self, counter: Counter) -> None:
        """Overwrite the counter, keeping whatever tasks are stored."""
        tasks = self.load_tasks()
        self._write_document(tasks, counter)

    def save(self, tasks: Iterable[Task], counter: Counter) -> None:
        """Write tasks and counter in a single replace."""
        self._write_document(tasks, counter)
