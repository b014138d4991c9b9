# src/todo_list/tasks/task_service.py

from __future__ import annotations

import logging

from .task_errors import AlreadyExists, NotFound
from .task_models import Task, TaskStatus
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """
    add / edit / delete / list / filter on top of a TaskStore.

    Every call reloads the document, mutates the in-memory list and writes it
    back. Nothing is cached between calls.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    @property
    def store(self) -> TaskStore:
        return self._store

    @staticmethod
    def _find_index(tasks: list[Task], task_id: int) -> int:
        for i, task in enumerate(tasks):
            if task.id == task_id:
                return i
        return -1

    def add(self, title: str, status: str | TaskStatus = TaskStatus.TODO) -> Task:
        if not title:
            raise ValueError("title is required")
        parsed = TaskStatus.parse(status)

        tasks = self._store.load_tasks()
        if any(t.title == title for t in tasks):
            logger.debug("Refusing duplicate title=%r", title)
            raise AlreadyExists(title)

        counter = self._store.load_counter()
        task = Task(id=counter.increment(), title=title, status=parsed)
        tasks.append(task)
        self._store.save(tasks, counter)

        logger.info("Task added id=%s status=%s", task.id, task.status.value)
        return task

    def edit(
        self,
        task_id: int,
        *,
        title: str | None = None,
        status: str | TaskStatus | None = None,
    ) -> Task:
        """
        Update title and/or status of the first task with this id.

        None or "" leaves the field untouched. The id never changes.
        """
        parsed = TaskStatus.parse(status) if status else None

        tasks = self._store.load_tasks()
        idx = self._find_index(tasks, task_id)
        if idx == -1:
            raise NotFound(task_id)

        task = tasks[idx]
        if title:
            task.title = title
        if parsed is not None:
            task.status = parsed
        self._store.save_tasks(tasks)

        logger.info("Task edited id=%s status=%s", task.id, task.status.value)
        return task

    def delete(self, task_id: int) -> list[Task]:
        """Remove the first task with this id and return what is left."""
        tasks = self._store.load_tasks()
        idx = self._find_index(tasks, task_id)
        if idx == -1:
            raise NotFound(task_id)

        del tasks[idx]
        # ids are not reclaimed; the counter just steps back
        counter = self._store.load_counter()
        counter.decrement()
        self._store.save(tasks, counter)

        logger.info("Task deleted id=%s counter=%s", task_id, counter.value)
        return tasks

    def list_tasks(self) -> list[Task]:
        return self._store.load_tasks()

    def filter_tasks(self, status: str | TaskStatus) -> list[Task]:
        parsed = TaskStatus.parse(status)
        return [t for t in self._store.load_tasks() if t.status == parsed]
