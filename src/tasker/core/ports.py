# src/tasker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The repository depends on Protocols instead of pymongo classes directly.
A real `pymongo.collection.Collection` satisfies TaskCollection; tests pass an
in-memory fake.
"""

from typing import Any, Iterable, Mapping, Protocol


class InsertResult(Protocol):
    inserted_id: Any


class UpdateResult(Protocol):
    matched_count: int
    modified_count: int


class DeleteResult(Protocol):
    deleted_count: int


class TaskCollection(Protocol):
    """The subset of pymongo's Collection API the store adapter relies on."""

    def insert_one(self, document: Mapping[str, Any]) -> InsertResult: ...
    def find(self, filter: Mapping[str, Any]) -> Iterable[Mapping[str, Any]]: ...
    def update_one(
            self, filter: Mapping[str, Any], update: Mapping[str, Any]
    ) -> UpdateResult: ...
    def delete_one(self, filter: Mapping[str, Any]) -> DeleteResult: ...


class TaskRepo(Protocol):
    # Creation
    def add(self, text: str) -> Any: ...
    def create(self, task: Any) -> None: ...

    # Listing (raise NoMatchError when empty)
    def find_all(self) -> list[Any]: ...
    def find_pending(self) -> list[Any]: ...
    def find_finished(self) -> list[Any]: ...
    def find_by_text(self, text: str) -> list[Any]: ...

    # Mutation
    def complete(self, text: str) -> Any | None: ...
    def delete(self, text: str) -> int: ...
