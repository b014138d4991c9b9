# src/todo_list/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Iterable, Sequence

from .. import __version__
from ..tasks.task_models import Task, TaskStatus
from ..tasks.task_service import TaskService

CommandHandler = Callable[[TaskService, argparse.Namespace], str]
ArgsConfigurator = Callable[[argparse.ArgumentParser], None]

PROG = "todo"
DESCRIPTION = (
    "A To-Do List is a simple and effective productivity tool designed to help you "
    "organize tasks, set priorities, and track progress"
)
SEPARATOR = "=" * 46

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Subcommand registry; builds the argparse parser and dispatches to handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._configure: dict[str, ArgsConfigurator | None] = {}
        self._aliases: dict[str, list[str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ArgsConfigurator | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._configure[key] = configure
        self._aliases[key] = [a.lower() for a in aliases or []]
        for alias in self._aliases[key]:
            self._handlers[alias] = handler

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        sub = parser.add_subparsers(dest="command", metavar="<command>", required=True)
        for name, help_text in self._help.items():
            p = sub.add_parser(name, help=help_text, description=help_text, aliases=self._aliases[name])
            configure = self._configure[name]
            if configure is not None:
                configure(p)
        return parser

    def handle(self, service: TaskService, argv: Sequence[str] | None = None) -> str:
        """
        Parse argv and run the matching handler.
        Returns the text to print. Task errors propagate to the caller.
        """
        args = self.build_parser().parse_args(argv)
        handler = self._handlers[args.command]
        logger.debug("Dispatching command=%s", args.command)
        return handler(service, args)


registry = CommandRegistry()


# ---- formatting ----


def format_task(task: Task) -> str:
    return f"#{task.id} [{task.status.value}] {task.title}"


def format_tasks(tasks: Iterable[Task], empty: str = "No tasks.") -> str:
    lines = [format_task(t) for t in tasks]
    return "\n".join(lines) if lines else empty


def format_task_block(task: Task) -> str:
    lines = [f"{key}: {value}" for key, value in task.to_dict().items()]
    lines.append(SEPARATOR)
    return "\n".join(lines)


# ---- argument configurators ----


def _status_value(raw: str) -> str:
    # same normalization as TaskStatus.parse
    return raw.strip().lower()


def _status_arg(p: argparse.ArgumentParser, *, required: bool = False) -> None:
    p.add_argument(
        "-s",
        "--status",
        type=_status_value,
        choices=TaskStatus.choices(),
        required=required,
        help="The status of the task, one of: " + ", ".join(TaskStatus.choices()),
    )


def _id_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("-i", "--id", dest="task_id", type=int, required=True, help="The id of the task")


def _configure_add(p: argparse.ArgumentParser) -> None:
    p.add_argument("-t", "--title", required=True, help="The title of the task")
    _status_arg(p)


def _configure_edit(p: argparse.ArgumentParser) -> None:
    _id_arg(p)
    p.add_argument("-t", "--title", help="New title of the task")
    _status_arg(p)


def _configure_filter(p: argparse.ArgumentParser) -> None:
    _status_arg(p, required=True)


# ---- handlers ----


def cmd_add(service: TaskService, args: argparse.Namespace) -> str:
    task = service.add(args.title, args.status or TaskStatus.TODO)
    return f"Task added successfully!\n{format_task(task)}"


def cmd_edit(service: TaskService, args: argparse.Namespace) -> str:
    task = service.edit(args.task_id, title=args.title, status=args.status)
    return f"Task updated successfully!\n{format_task(task)}"


def cmd_delete(service: TaskService, args: argparse.Namespace) -> str:
    remaining = service.delete(args.task_id)
    return f"Task deleted successfully!\n{format_tasks(remaining)}"


def cmd_list(service: TaskService, args: argparse.Namespace) -> str:
    return format_tasks(service.list_tasks())


def cmd_filter(service: TaskService, args: argparse.Namespace) -> str:
    tasks = service.filter_tasks(args.status)
    if not tasks:
        return f"No tasks with status {args.status}."
    return "\n".join(format_task_block(t) for t in tasks)


registry.register("add", cmd_add, "Create a new item on your To-Do List.", _configure_add)
registry.register("edit", cmd_edit, "Edit an item from your To-Do List.", _configure_edit)
registry.register(
    "delete", cmd_delete, "Delete an item from your To-Do List.", _id_arg, aliases=["rm"]
)
registry.register("list", cmd_list, "List all tasks in your To-Do List.", aliases=["ls"])
registry.register(
    "filter", cmd_filter, "List tasks in your To-Do List with the given status.", _configure_filter
)
