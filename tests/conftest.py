# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasker.cli.bootstrap import create_initial_state
from tasker.core.state import AppState
from tasker.tasks.task_repository import TaskRepository
from tasker.tasks.task_store import TaskStore

from .fakes import FakeCollection


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap, main and the presenter.

    We intentionally use a SimpleNamespace rather than the real env-driven
    Settings, to keep unit tests isolated from the developer's environment.
    """
    return SimpleNamespace(
        log_level="WARNING",
        log_file_enabled=False,
        data_dir=tmp_path,
        log_file_path=tmp_path / "tasker.log",
        mongo_uri="mongodb://localhost:27017",
        database="tasker_test",
        collection="task",
        server_timeout_ms=50,
        color=False,
    )


@pytest.fixture()
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture()
def repo(collection: FakeCollection) -> TaskRepository:
    return TaskRepository(TaskStore(collection))


@pytest.fixture()
def state(settings: SimpleNamespace, collection: FakeCollection) -> AppState:
    """AppState wired through the real composition root, minus the network."""
    return create_initial_state(settings=settings, collection=collection)
