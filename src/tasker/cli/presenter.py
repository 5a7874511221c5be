# src/tasker/cli/presenter.py

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

import click

from ..tasks.task_models import Task


class EmptyContext(StrEnum):
    """Which listing came back empty; decides the hint shown."""

    PENDING = "pending"
    ALL = "all"
    FINISHED = "finished"


_EMPTY_HINTS: dict[EmptyContext, str] = {
    EmptyContext.PENDING: "Run `add 'task'` to add a task",
    EmptyContext.ALL: "Run `add 'task'` to add a task",
    EmptyContext.FINISHED: "Run `done 'task'` to complete a task",
}


class Presenter:
    """
    Terminal output for the CLI.

    Completed tasks render green, pending ones yellow. When `color` is None,
    click decides (ANSI is stripped when stdout is not a terminal).
    """

    def __init__(self, *, color: bool | None = None) -> None:
        self.color = color

    def _echo(self, text: str, *, err: bool = False) -> None:
        click.echo(text, err=err, color=self.color)

    def render_tasks(self, tasks: Sequence[Task]) -> None:
        for i, task in enumerate(tasks, start=1):
            fg = "green" if task.completed else "yellow"
            self._echo(click.style(f"{i}: {task.text}", fg=fg))

    def render_empty(self, context: EmptyContext) -> None:
        self._echo("Nothing to see here.")
        self._echo(_EMPTY_HINTS[context])

    def render_added(self, task: Task) -> None:
        self._echo(f"Added: {task.text}")

    def render_completed(self, task: Task) -> None:
        self._echo(click.style(f"Completed: {task.text}", fg="green"))

    def render_deleted(self, count: int) -> None:
        noun = "task" if count == 1 else "tasks"
        self._echo(f"Deleted {count} {noun}.")

    def render_notice(self, message: str) -> None:
        self._echo(click.style(message, fg="yellow"))

    def render_error(self, message: str) -> None:
        self._echo(click.style(message, fg="red"), err=True)
