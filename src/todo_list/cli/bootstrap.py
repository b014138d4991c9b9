# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the concrete TaskStore into a TaskService.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_service(*, settings: Settings | None = None) -> TaskService:
    """
    Build a TaskService from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.store_config())
    logger.debug("Using task document %s", store.db_path)
    return TaskService(store)
