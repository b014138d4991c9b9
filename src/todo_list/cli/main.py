# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the TaskService, then runs exactly one command.
Exit codes: 0 ok, 1 task/storage error, 2 usage error (argparse).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_errors import ParseError, TaskError
from .bootstrap import create_service
from .commands import registry

logger = logging.getLogger(__name__)


def run(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run one command against the configured store and return the exit code."""
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    service = create_service(settings=settings)

    try:
        reply = registry.handle(service, argv)
    except ParseError as e:
        logger.error("Task document is corrupt: %s", e)
        return 1
    except (TaskError, ValueError) as e:
        print(str(e), file=err)
        return 1
    except OSError as e:
        logger.error("I/O failure on %s: %s", service.store.db_path, e)
        return 1

    print(reply, file=out)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()

    level_name = settings.log_level.upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    logger.debug("Starting %s", settings.app_name)
    return run(argv, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
