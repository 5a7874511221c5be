# src/tasker/tasks/task_store.py

from __future__ import annotations

import logging
from typing import Any

from bson import ObjectId
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from ..core.ports import TaskCollection
from .errors import StoreConnectionError, StoreError
from .task_models import All, ByCompleted, ByText, MarkCompleted, Task, TaskPredicate, TaskUpdate

logger = logging.getLogger(__name__)


def connect(
    uri: str,
    database: str,
    collection_name: str,
    *,
    timeout_ms: int | None = None,
) -> TaskCollection:
    """
    Connect to MongoDB, verify liveness with a ping, and return the task collection.

    Single attempt: no retry and no reconnection logic. Any failure is raised
    as StoreConnectionError and is fatal for the process.
    """
    kwargs: dict[str, Any] = {"tz_aware": True}
    if timeout_ms is not None:
        kwargs["serverSelectionTimeoutMS"] = int(timeout_ms)

    try:
        client: MongoClient = MongoClient(uri, **kwargs)
    except (PyMongoError, ValueError, TypeError) as exc:
        raise StoreConnectionError(f"invalid store address {uri!r}: {exc}") from exc

    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise StoreConnectionError(f"store at {uri!r} is unreachable: {exc}") from exc

    logger.debug("Connected to %s db=%s collection=%s", uri, database, collection_name)
    return client[database][collection_name]


class TaskStore:
    """
    MongoDB-backed task store.

    Typed predicates and update intents are translated to query/update
    documents here and nowhere else. Driver errors are re-raised as StoreError.
    """

    def __init__(self, collection: TaskCollection) -> None:
        self._collection = collection

    # ---- translation ----

    @staticmethod
    def query_for(predicate: TaskPredicate) -> dict[str, Any]:
        match predicate:
            case All():
                return {}
            case ByCompleted(completed=completed):
                return {"completed": bool(completed)}
            case ByText(text=text):
                return {"text": text}
        raise TypeError(f"unsupported task predicate: {predicate!r}")

    @staticmethod
    def update_for(intent: TaskUpdate) -> dict[str, Any]:
        match intent:
            case MarkCompleted(at=at):
                return {"$set": {"completed": True, "updated_at": at}}
        raise TypeError(f"unsupported task update: {intent!r}")

    # ---- public API ----

    def insert(self, task: Task) -> None:
        try:
            self._collection.insert_one(task.to_document())
        except PyMongoError as exc:
            raise StoreError(f"failed to insert task: {exc}") from exc
        logger.debug("Task inserted id=%s", task.id)

    def find(self, predicate: TaskPredicate) -> list[Task]:
        """Drain the cursor fully; order is whatever the store returns."""
        query = self.query_for(predicate)
        try:
            docs = list(self._collection.find(query))
        except PyMongoError as exc:
            raise StoreError(f"failed to query tasks: {exc}") from exc
        return [Task.from_document(dict(d)) for d in docs]

    def update(self, task_id: ObjectId, intent: TaskUpdate) -> int:
        """Apply an update intent to one pending task by id. Returns the matched count."""
        query: dict[str, Any] = {"_id": task_id, "completed": False}
        try:
            res = self._collection.update_one(query, self.update_for(intent))
        except PyMongoError as exc:
            raise StoreError(f"failed to update task {task_id}: {exc}") from exc
        logger.debug("Task update id=%s matched=%s", task_id, res.matched_count)
        return int(res.matched_count)

    def delete(self, task_id: ObjectId) -> int:
        """Delete one task by id. Returns the deleted count."""
        try:
            res = self._collection.delete_one({"_id": task_id})
        except PyMongoError as exc:
            raise StoreError(f"failed to delete task {task_id}: {exc}") from exc
        logger.debug("Task delete id=%s deleted=%s", task_id, res.deleted_count)
        return int(res.deleted_count)
