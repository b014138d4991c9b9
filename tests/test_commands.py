# tests/test_commands.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_list import __version__
from todo_list.cli.commands import SEPARATOR, CommandRegistry
from todo_list.cli.main import run
from todo_list.config import Settings
from todo_list.tasks.task_service import TaskService


def test_add_then_list(settings: Settings, capsys) -> None:
    assert run(["add", "--title", "write docs"], settings=settings) == 0
    assert run(["add", "-t", "ship", "-s", "doing"], settings=settings) == 0
    out = capsys.readouterr().out
    assert "Task added successfully!\n#1 [todo] write docs" in out
    assert "#2 [doing] ship" in out

    assert run(["list"], settings=settings) == 0
    assert capsys.readouterr().out == "#1 [todo] write docs\n#2 [doing] ship\n"


def test_list_empty(settings: Settings, capsys) -> None:
    assert run(["ls"], settings=settings) == 0
    assert capsys.readouterr().out == "No tasks.\n"


def test_duplicate_add_reports_on_stderr(settings: Settings, capsys) -> None:
    run(["add", "-t", "A"], settings=settings)
    capsys.readouterr()

    assert run(["add", "-t", "A"], settings=settings) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "already exists" in captured.err


def test_edit_and_delete_unknown_id(settings: Settings, capsys) -> None:
    assert run(["edit", "--id", "9", "--title", "x"], settings=settings) == 1
    assert run(["delete", "--id", "9"], settings=settings) == 1
    err = capsys.readouterr().err
    assert err.count("Task with id 9 not found.") == 2


def test_edit_then_delete(settings: Settings, capsys) -> None:
    run(["add", "-t", "A"], settings=settings)
    run(["add", "-t", "B"], settings=settings)
    capsys.readouterr()

    assert run(["edit", "-i", "1", "-s", "done"], settings=settings) == 0
    assert capsys.readouterr().out == "Task updated successfully!\n#1 [done] A\n"

    assert run(["rm", "-i", "1"], settings=settings) == 0
    assert capsys.readouterr().out == "Task deleted successfully!\n#2 [todo] B\n"


def test_filter_prints_key_value_blocks(settings: Settings, capsys) -> None:
    run(["add", "-t", "A", "-s", "done"], settings=settings)
    run(["add", "-t", "B"], settings=settings)
    capsys.readouterr()

    assert run(["filter", "--status", "done"], settings=settings) == 0
    assert capsys.readouterr().out == f"id: 1\ntitle: A\nstatus: done\n{SEPARATOR}\n"

    assert run(["filter", "-s", "doing"], settings=settings) == 0
    assert capsys.readouterr().out == "No tasks with status doing.\n"


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["add"],
        ["add", "-t", "A", "-s", "later"],
        ["edit", "-i", "one"],
        ["filter"],
        ["bogus"],
    ],
)
def test_usage_errors_exit_with_2(settings: Settings, db_path: Path, argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        run(argv, settings=settings)
    assert exc.value.code == 2
    assert not db_path.exists()


def test_version(settings: Settings, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        run(["--version"], settings=settings)
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"todo {__version__}"


def test_corrupt_document_is_logged_and_fails(settings: Settings, db_path: Path, caplog) -> None:
    db_path.write_text("{oops", "utf-8")

    with caplog.at_level(logging.ERROR, logger="todo_list"):
        assert run(["list"], settings=settings) == 1

    assert "Task document is corrupt" in caplog.text
    assert db_path.read_text("utf-8") == "{oops"


def test_registry_dispatches_aliases(service: TaskService) -> None:
    reg = CommandRegistry()
    called: list[str] = []

    def h(service, args):
        called.append(args.command)
        return "ok"

    reg.register("ping", h, "ping", aliases=["p"])

    assert reg.handle(service, ["ping"]) == "ok"
    assert reg.handle(service, ["p"]) == "ok"
    assert called == ["ping", "p"]


def test_bad_counter_fails_list_too(settings: Settings, db_path: Path, capsys, caplog) -> None:
    db_path.write_text('{"counter": "three", "tasks": []}', "utf-8")

    with caplog.at_level(logging.ERROR, logger="todo_list"):
        assert run(["list"], settings=settings) == 1

    assert capsys.readouterr().out == ""
    assert "'counter' must be an integer" in caplog.text


def test_io_failure_is_logged_with_path(settings: Settings, db_path: Path, caplog) -> None:
    db_path.mkdir()

    with caplog.at_level(logging.ERROR, logger="todo_list"):
        assert run(["list"], settings=settings) == 1
        assert run(["add", "-t", "A"], settings=settings) == 1

    failures = [r for r in caplog.records if "I/O failure" in r.getMessage()]
    assert len(failures) == 2
    assert str(db_path) in failures[0].getMessage()


def test_status_option_is_case_insensitive(settings: Settings, capsys) -> None:
    assert run(["add", "-t", "A", "-s", "DONE"], settings=settings) == 0
    assert run(["filter", "--status", " Done "], settings=settings) == 0

    out = capsys.readouterr().out
    assert "#1 [done] A" in out
    assert "title: A\nstatus: done" in out
