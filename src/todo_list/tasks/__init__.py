"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, Counter)
- task_errors.py: NotFound / AlreadyExists / InvalidStatus / ParseError
- task_store.py: JSON document storage (atomic full rewrites)
- task_service.py: add / edit / delete / list / filter
"""

from .task_errors import AlreadyExists, InvalidStatus, NotFound, ParseError, TaskError
from .task_models import Counter, Task, TaskStatus
from .task_service import TaskService
from .task_store import StoreConfig, TaskStore

__all__ = [
    "AlreadyExists",
    "Counter",
    "InvalidStatus",
    "NotFound",
    "ParseError",
    "StoreConfig",
    "Task",
    "TaskError",
    "TaskService",
    "TaskStatus",
    "TaskStore",
]
