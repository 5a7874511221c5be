# src/tasker/tasks/errors.py

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of failure kinds. Callers branch on `err.kind`."""

    VALIDATION = "validation"
    NO_MATCH = "no_match"
    DELETE_FAILED = "delete_failed"
    STORE = "store"
    CONNECTION = "connection"


class TaskerError(Exception):
    """Base class for every error the CLI reports to the user."""

    kind: ErrorKind = ErrorKind.STORE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskerError):
    """A required argument is missing or blank. Raised before any store access."""

    kind = ErrorKind.VALIDATION


class NoMatchError(TaskerError):
    """A lookup predicate selected zero records."""

    kind = ErrorKind.NO_MATCH


class DeleteFailedError(TaskerError):
    """A match was found but the store reported zero records removed."""

    kind = ErrorKind.DELETE_FAILED


class StoreError(TaskerError):
    kind = ErrorKind.STORE


class StoreConnectionError(StoreError):
    """Connecting to (or pinging) the store failed at startup."""

    kind = ErrorKind.CONNECTION
