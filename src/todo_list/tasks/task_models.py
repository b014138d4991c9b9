# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .task_errors import InvalidStatus


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The string value is what gets persisted, so renaming a member breaks
    existing documents.
    """

    TODO = "todo"
    DOING = "doing"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        """Strict conversion used at the service boundary."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise InvalidStatus(raw) from None

    @classmethod
    def choices(cls) -> list[str]:
        return [s.value for s in cls]


@dataclass(slots=True)
class Task:
    id: int
    title: str
    status: TaskStatus = TaskStatus.TODO

    def to_dict(self) -> dict[str, Any]:
        # key order is part of the on-disk format
        return {"id": self.id, "title": self.title, "status": self.status.value}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from a decoded JSON object.

        Raises ValueError on a wrong shape; the store turns that into ParseError.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise ValueError(f"task id must be an integer, got {task_id!r}")

        title = raw.get("title")
        if not isinstance(title, str):
            raise ValueError(f"task {task_id} has no string title")

        status = raw.get("status", TaskStatus.TODO.value)
        try:
            parsed = TaskStatus(status)
        except ValueError:
            raise ValueError(f"task {task_id} has unknown status {status!r}") from None

        return cls(id=task_id, title=title, status=parsed)


@dataclass(slots=True)
class Counter:
    """Last issued task id. Decremented on delete, never reset."""

    value: int = 0

    def increment(self) -> int:
        self.value += 1
        return self.value

    def decrement(self) -> int:
        self.value -= 1
        return self.value
