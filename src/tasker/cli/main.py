# src/tasker/cli/main.py

"""
CLI entrypoint.

Initializes logging, validates the command, connects to the store (once),
runs the command and converts errors into exit codes:
- 0: success (including empty listings and the already-completed notice)
- 1: validation, no-match, delete or store failure
- 2: usage error (unknown command)
"""

from __future__ import annotations

import logging
from functools import partial

import click

from .. import __version__
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import StoreError, TaskerError
from .bootstrap import create_initial_state
from .commands import UnknownCommandError, registry
from .presenter import Presenter

logger = logging.getLogger(__name__)


def _configure_logging(settings) -> None:
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_file = settings.log_file_path if getattr(settings, "log_file_enabled", False) else None
    setup_logging(log_file=log_file, console_level=console_level)


@click.command(
    name="tasker",
    help="A simple CLI program to manage your tasks.",
    epilog="\b\n" + registry.build_help(),
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("command", required=False)
@click.argument("args", nargs=-1)
@click.version_option(__version__, prog_name="tasker")
@click.pass_context
def cli(ctx: click.Context, command: str | None, args: tuple[str, ...]) -> None:
    # ctx.obj may carry "settings" and "build_state" overrides (used by tests).
    obj = ctx.ensure_object(dict)
    settings = obj.get("settings") or get_settings()
    build_state = obj.get("build_state") or partial(create_initial_state, settings=settings)

    _configure_logging(settings)
    presenter = Presenter(color=None if settings.color else False)

    try:
        registry.handle(command, args, build_state=build_state, presenter=presenter)
    except UnknownCommandError as exc:
        raise click.UsageError(exc.message, ctx=ctx) from exc
    except StoreError as exc:
        logger.debug("Store failure (%s)", exc.kind, exc_info=True)
        presenter.render_error(exc.message)
        ctx.exit(1)
    except TaskerError as exc:
        logger.debug("Command failed (%s): %s", exc.kind, exc.message)
        presenter.render_error(exc.message)
        ctx.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
