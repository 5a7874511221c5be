# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasker.config import DEFAULT_COLLECTION, DEFAULT_DATABASE, DEFAULT_MONGO_URI, Settings

_VARS = (
    "TASKER_MONGO_URI",
    "MONGO_URI",
    "TASKER_DATABASE",
    "TASKER_COLLECTION",
    "TASKER_SERVER_TIMEOUT_MS",
    "TASKER_LOG_LEVEL",
    "TASKER_LOG_FILE_ENABLED",
    "TASKER_DATA_DIR",
    "TASKER_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_point_at_local_tasker_collection() -> None:
    s = Settings.from_env()

    assert s.mongo_uri == DEFAULT_MONGO_URI == "mongodb://localhost:27017"
    assert s.database == DEFAULT_DATABASE == "tasker"
    assert s.collection == DEFAULT_COLLECTION == "task"
    assert s.server_timeout_ms is None
    assert s.log_level == "WARNING"
    assert s.color is True


def test_environment_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKER_MONGO_URI", "mongodb://db.internal:27018")
    monkeypatch.setenv("TASKER_DATABASE", "work")
    monkeypatch.setenv("TASKER_COLLECTION", "todo")
    monkeypatch.setenv("TASKER_SERVER_TIMEOUT_MS", "2500")
    monkeypatch.setenv("TASKER_COLOR", "off")
    monkeypatch.setenv("TASKER_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.mongo_uri == "mongodb://db.internal:27018"
    assert (s.database, s.collection) == ("work", "todo")
    assert s.server_timeout_ms == 2500
    assert s.color is False
    assert s.log_file_path == tmp_path / "tasker.log"


def test_generic_mongo_uri_is_a_fallback(monkeypatch) -> None:
    monkeypatch.setenv("MONGO_URI", "mongodb://shared:27017")
    assert Settings.from_env().mongo_uri == "mongodb://shared:27017"

    monkeypatch.setenv("TASKER_MONGO_URI", "mongodb://mine:27017")
    assert Settings.from_env().mongo_uri == "mongodb://mine:27017"


def test_bad_timeout_falls_back_to_driver_default(monkeypatch) -> None:
    monkeypatch.setenv("TASKER_SERVER_TIMEOUT_MS", "soon")
    assert Settings.from_env().server_timeout_ms is None
