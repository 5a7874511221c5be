# src/tasker/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .ports import TaskRepo


@dataclass(slots=True)
class AppState:
    # Settings are kept on the state so handlers and the presenter share one object.
    settings: Any
    tasks: TaskRepo
    close_store: Callable[[], None] | None = None
