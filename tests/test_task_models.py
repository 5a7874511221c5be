# tests/test_task_models.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from bson import ObjectId

from tasker.tasks.errors import TaskerError, ValidationError
from tasker.tasks.task_models import Task


def test_new_task_is_pending_with_equal_timestamps() -> None:
    task = Task.new("write report")

    assert isinstance(task.id, ObjectId)
    assert task.text == "write report"
    assert task.completed is False
    assert task.created_at == task.updated_at
    assert task.created_at.tzinfo is not None


def test_new_task_ids_are_unique() -> None:
    assert Task.new("a").id != Task.new("a").id


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_new_task_rejects_blank_text(text: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        Task.new(text)
    assert isinstance(excinfo.value, TaskerError)


def test_constructor_rejects_updated_before_created() -> None:
    created = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    with pytest.raises(ValidationError):
        Task(
            id=ObjectId(),
            created_at=created,
            updated_at=created - timedelta(days=1),
            text="t",
        )


def test_mark_completed_refreshes_updated_at_only() -> None:
    created = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    task = Task.new("t", now=created)

    done = task.mark_completed(created + timedelta(minutes=5))

    assert done.completed is True
    assert done.id == task.id
    assert done.created_at == created
    assert done.updated_at == created + timedelta(minutes=5)
    assert task.completed is False  # the source task is untouched


def test_mark_completed_never_moves_updated_at_backwards() -> None:
    created = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    task = Task.new("t", now=created)

    done = task.mark_completed(created - timedelta(hours=1))

    assert done.updated_at == created


def test_from_document_treats_naive_datetimes_as_utc() -> None:
    oid = ObjectId()
    naive = datetime(2024, 3, 4, 5, 6, 7)
    task = Task.from_document(
        {"_id": oid, "created_at": naive, "updated_at": naive, "text": "x", "completed": True}
    )

    assert task.id == oid
    assert task.created_at == naive.replace(tzinfo=UTC)
    assert task.completed is True


def test_to_document_uses_store_field_names() -> None:
    task = Task.new("buy milk")
    doc = task.to_document()

    assert set(doc) == {"_id", "created_at", "updated_at", "text", "completed"}
    assert Task.from_document(doc) == task
