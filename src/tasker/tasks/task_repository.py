# src/tasker/tasks/task_repository.py

from __future__ import annotations

import logging

from .errors import DeleteFailedError, NoMatchError
from .task_models import All, ByCompleted, ByText, MarkCompleted, Task, TaskPredicate, utc_now
from .task_store import TaskStore

logger = logging.getLogger(__name__)

ALREADY_COMPLETED_NOTICE = "Task is already marked as completed"


class TaskRepository:
    """
    Task operations layer. All domain rules live here.

    Every lookup goes through `filter`, which treats an empty result as
    NoMatchError rather than an empty list.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    # ---- creation ----

    def create(self, task: Task) -> None:
        """Insert a fully populated task (id, timestamps and defaults already set)."""
        self._store.insert(task)
        logger.info("Task created id=%s", task.id)

    def add(self, text: str) -> Task:
        task = Task.new(text)
        self.create(task)
        return task

    # ---- lookups ----

    def filter(self, predicate: TaskPredicate) -> list[Task]:
        tasks = self._store.find(predicate)
        if not tasks:
            raise NoMatchError(f"no tasks match {predicate!r}")
        return tasks

    def find_all(self) -> list[Task]:
        return self.filter(All())

    def find_pending(self) -> list[Task]:
        return self.filter(ByCompleted(False))

    def find_finished(self) -> list[Task]:
        return self.filter(ByCompleted(True))

    def find_by_text(self, text: str) -> list[Task]:
        return self.filter(ByText(text))

    # ---- mutation ----

    def complete(self, text: str) -> Task | None:
        """
        Mark the first not-yet-completed task with this text as completed.

        Already completed matches are skipped with a notice. Returns the
        updated task, or None when the only remaining matches were already
        completed. Raises NoMatchError if every pending match vanished
        before it could be updated.
        """
        try:
            matches = self.find_by_text(text)
        except NoMatchError as exc:
            raise NoMatchError(
                "no task found to mark as complete\nrun `all` to get all tasks"
            ) from exc

        already_completed = False
        for task in matches:
            if task.completed:
                logger.info("%s (id=%s)", ALREADY_COMPLETED_NOTICE, task.id)
                already_completed = True
                continue

            updated = task.mark_completed(utc_now())
            if self._store.update(task.id, MarkCompleted(updated.updated_at)) == 0:
                # Completed or removed between lookup and update; try the next match.
                logger.info("Task id=%s changed before it could be completed", task.id)
                continue
            logger.info("Task completed id=%s", task.id)
            return updated

        if not already_completed:
            # Every pending match vanished between lookup and update.
            raise NoMatchError("no task found to mark as complete\nrun `all` to get all tasks")
        return None

    def delete(self, text: str) -> int:
        """Delete every task with this text. Returns the number deleted."""
        try:
            matches = self.find_by_text(text)
        except NoMatchError as exc:
            raise NoMatchError("no task found to delete\nrun `all` to get all tasks") from exc

        deleted = 0
        for task in matches:
            if self._store.delete(task.id) == 0:
                raise DeleteFailedError("no tasks were deleted")
            deleted += 1
            logger.info("Task deleted id=%s", task.id)
        return deleted
