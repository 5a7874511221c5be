# src/tasker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Any

from bson import ObjectId

from .errors import ValidationError


def utc_now() -> datetime:
    # MongoDB stores milliseconds; truncate so a value survives a round trip unchanged.
    now = datetime.now(UTC)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


@dataclass(frozen=True, slots=True)
class Task:
    id: ObjectId
    created_at: datetime
    updated_at: datetime
    text: str
    completed: bool = False

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise ValidationError("can not add empty task")
        if self.updated_at < self.created_at:
            raise ValidationError(
                f"task {self.id}: updated_at {self.updated_at} is before created_at {self.created_at}"
            )

    @classmethod
    def new(cls, text: str, *, now: datetime | None = None) -> Task:
        """Build a fresh pending task. The id is assigned here, never by the store."""
        ts = now or utc_now()
        return cls(id=ObjectId(), created_at=ts, updated_at=ts, text=text, completed=False)

    def mark_completed(self, now: datetime | None = None) -> Task:
        ts = now or utc_now()
        # updated_at never moves behind created_at, even with a skewed clock.
        return replace(self, completed=True, updated_at=max(ts, self.created_at))

    def to_document(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "text": self.text,
            "completed": self.completed,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Task:
        return cls(
            id=doc["_id"],
            created_at=_as_utc(doc["created_at"]),
            updated_at=_as_utc(doc["updated_at"]),
            text=str(doc.get("text") or ""),
            completed=bool(doc.get("completed", False)),
        )


def _as_utc(value: datetime) -> datetime:
    # Documents written by other clients may come back naive; they are UTC in BSON.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


# ---- predicates ----


@dataclass(frozen=True, slots=True)
class All:
    """Match every task."""


@dataclass(frozen=True, slots=True)
class ByCompleted:
    completed: bool


@dataclass(frozen=True, slots=True)
class ByText:
    text: str


TaskPredicate = All | ByCompleted | ByText


# ---- update intents ----


@dataclass(frozen=True, slots=True)
class MarkCompleted:
    """Set completed=True and refresh updated_at."""

    at: datetime


TaskUpdate = MarkCompleted
