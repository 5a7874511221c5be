# src/tasker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- connects to the document store once (fatal on failure),
- wires the concrete store into a TaskRepository,
- returns the AppState handed to the command dispatcher.
"""

from __future__ import annotations

import contextlib
import logging

from ..config import Settings, get_settings
from ..core.ports import TaskCollection
from ..core.state import AppState
from ..tasks.task_repository import TaskRepository
from ..tasks.task_store import TaskStore, connect

logger = logging.getLogger(__name__)


def _closer_for(collection: TaskCollection):
    client = getattr(getattr(collection, "database", None), "client", None)
    if client is None or not hasattr(client, "close"):
        return None

    def _close() -> None:
        with contextlib.suppress(Exception):
            client.close()

    return _close


def create_initial_state(
    *,
    settings: Settings | None = None,
    collection: TaskCollection | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping the collection injectable lets tests run against an in-memory fake.
    If collection is None, connects using settings (raises StoreConnectionError).
    """
    if settings is None:
        settings = get_settings()

    if collection is None:
        collection = connect(
            settings.mongo_uri,
            settings.database,
            settings.collection,
            timeout_ms=settings.server_timeout_ms,
        )

    state = AppState(
        settings=settings,
        tasks=TaskRepository(TaskStore(collection)),
        close_store=_closer_for(collection),
    )
    logger.debug("State ready db=%s collection=%s", settings.database, settings.collection)
    return state
