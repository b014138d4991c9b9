# src/todo_list/tasks/task_errors.py

from __future__ import annotations

from pathlib import Path
from typing import Any


class TaskError(Exception):
    """Base class for every error raised by the task layer."""


class NotFound(TaskError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} not found.")


class AlreadyExists(TaskError):
    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"Task {title!r} already exists.")


class InvalidStatus(TaskError, ValueError):
    def __init__(self, value: Any) -> None:
        self.value = value
        allowed = ", ".join(("todo", "doing", "done"))
        super().__init__(f"Invalid status {value!r}; expected one of: {allowed}.")


class ParseError(TaskError):
    """The persisted document exists but cannot be decoded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot parse {self.path}: {reason}")
