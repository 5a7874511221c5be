# tests/test_presenter.py

from __future__ import annotations

import click

from tasker.cli.presenter import EmptyContext, Presenter
from tasker.tasks.task_models import Task


def test_tasks_are_numbered_from_one(capsys) -> None:
    tasks = [Task.new("a"), Task.new("b").mark_completed()]

    Presenter(color=False).render_tasks(tasks)

    assert capsys.readouterr().out == "1: a\n2: b\n"


def test_completed_and_pending_use_different_colors(capsys) -> None:
    pending = Task.new("todo")
    done = Task.new("done").mark_completed()

    Presenter(color=True).render_tasks([pending, done])

    out = capsys.readouterr().out
    assert click.style("1: todo", fg="yellow") in out
    assert click.style("2: done", fg="green") in out


def test_empty_hints_depend_on_context(capsys) -> None:
    p = Presenter(color=False)

    p.render_empty(EmptyContext.ALL)
    assert capsys.readouterr().out == "Nothing to see here.\nRun `add 'task'` to add a task\n"

    p.render_empty(EmptyContext.FINISHED)
    assert "Run `done 'task'` to complete a task" in capsys.readouterr().out


def test_errors_go_to_stderr(capsys) -> None:
    Presenter(color=False).render_error("no tasks were deleted")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "no tasks were deleted\n"


def test_deleted_count_is_pluralized(capsys) -> None:
    p = Presenter(color=False)
    p.render_deleted(1)
    p.render_deleted(3)
    assert capsys.readouterr().out == "Deleted 1 task.\nDeleted 3 tasks.\n"
