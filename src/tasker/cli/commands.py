# src/tasker/cli/commands.py

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import cast

from ..core.state import AppState
from ..tasks.errors import NoMatchError, ValidationError
from ..tasks.task_repository import ALREADY_COMPLETED_NOTICE
from .presenter import EmptyContext, Presenter

CommandHandler = Callable[[AppState, str | None, Presenter], None]
StateFactory = Callable[[], AppState]

logger = logging.getLogger(__name__)

TASK_NAME_REQUIRED = "Task Name is mandatory\nRun `all` to get list of all tasks"


class UnknownCommandError(ValidationError):
    pass


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    aliases: tuple[str, ...] = ()
    requires_text: bool = False
    missing_text_message: str = TASK_NAME_REQUIRED

    def validate(self, args: Sequence[str]) -> str | None:
        """Return the free-text argument (first positional only), or raise ValidationError."""
        text = args[0] if args else None
        if self.requires_text and (text is None or not text.strip()):
            raise ValidationError(self.missing_text_message)
        return text


class CommandRegistry:
    """Verb registry used by the entry point (add, all, done, finished, rm)."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._by_name: dict[str, Command] = {}
        self._default: Command | None = None

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        requires_text: bool = False,
        missing_text_message: str = TASK_NAME_REQUIRED,
    ) -> Command:
        aliases = aliases or []
        cmd = Command(
            name=name.lower(),
            handler=handler,
            help_text=help_text,
            aliases=tuple(a.lower() for a in aliases),
            requires_text=requires_text,
            missing_text_message=missing_text_message,
        )
        self._by_name[cmd.name] = cmd
        self._commands[cmd.name] = cmd
        for alias in cmd.aliases:
            self._commands[alias] = cmd
        return cmd

    def set_default(self, handler: CommandHandler, help_text: str) -> None:
        self._default = Command(name="", handler=handler, help_text=help_text)

    def resolve(self, name: str | None) -> Command:
        if name is None:
            if self._default is None:
                raise UnknownCommandError("No command given.")
            return self._default
        cmd = self._commands.get(name.lower())
        if cmd is None:
            raise UnknownCommandError(f"Unknown command: {name}. Use --help to list commands.")
        return cmd

    def handle(
        self,
        name: str | None,
        args: Sequence[str],
        *,
        build_state: StateFactory,
        presenter: Presenter,
    ) -> None:
        """
        Resolve, validate, then connect and run. Validation happens before
        build_state so a bad argument never touches the store.
        """
        cmd = self.resolve(name)
        text = cmd.validate(args)

        state = build_state()
        try:
            logger.debug("Running command %r", cmd.name or "<default>")
            cmd.handler(state, text, presenter)
        finally:
            if state.close_store is not None:
                with contextlib.suppress(Exception):
                    state.close_store()

    def build_help(self) -> str:
        lines = ["Commands:"]
        if self._default is not None:
            lines.append(f"  (none)      {self._default.help_text}")
        for cmd in self._by_name.values():
            label = cmd.name
            if cmd.aliases:
                label = f"{label}, {', '.join(cmd.aliases)}"
            if cmd.requires_text:
                label = f"{label} TEXT"
            lines.append(f"  {label:<11} {cmd.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_pending(state: AppState, text: str | None, presenter: Presenter) -> None:
    try:
        tasks = state.tasks.find_pending()
    except NoMatchError:
        presenter.render_empty(EmptyContext.PENDING)
        return
    presenter.render_tasks(tasks)


def cmd_add(state: AppState, text: str | None, presenter: Presenter) -> None:
    task = state.tasks.add(cast(str, text))
    presenter.render_added(task)


def cmd_all(state: AppState, text: str | None, presenter: Presenter) -> None:
    try:
        tasks = state.tasks.find_all()
    except NoMatchError:
        presenter.render_empty(EmptyContext.ALL)
        return
    presenter.render_tasks(tasks)


def cmd_done(state: AppState, text: str | None, presenter: Presenter) -> None:
    task = state.tasks.complete(cast(str, text))
    if task is None:
        presenter.render_notice(ALREADY_COMPLETED_NOTICE)
        return
    presenter.render_completed(task)


def cmd_finished(state: AppState, text: str | None, presenter: Presenter) -> None:
    try:
        tasks = state.tasks.find_finished()
    except NoMatchError:
        presenter.render_empty(EmptyContext.FINISHED)
        return
    presenter.render_tasks(tasks)


def cmd_rm(state: AppState, text: str | None, presenter: Presenter) -> None:
    deleted = state.tasks.delete(cast(str, text))
    presenter.render_deleted(deleted)


registry.set_default(cmd_pending, help_text="List pending tasks.")
registry.register(
    "add",
    cmd_add,
    help_text="Add new task to the list.",
    aliases=["a"],
    requires_text=True,
    missing_text_message="can not add empty task",
)
registry.register("all", cmd_all, help_text="List all the tasks.", aliases=["l"])
registry.register(
    "done", cmd_done, help_text="Complete a task on the list.", aliases=["d"], requires_text=True
)
registry.register("finished", cmd_finished, help_text="List completed tasks.", aliases=["f"])
registry.register("rm", cmd_rm, help_text="Delete a task on the list.", requires_text=True)
