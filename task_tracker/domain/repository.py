"""Persistence contracts the domain depends on.

``TaskRepository`` is what application services use. ``RecordStore`` is the
narrow primitive a repository implementation sits on: load the whole record
collection, or replace it. Stores report failures as ``Err`` values; the
repository turns them into ``StoreError``.

Consistency model: every mutating repository call is one
read-entire-collection, mutate-in-memory, write-entire-collection cycle.
Nothing coordinates concurrent callers, so two mutations racing on the same
store can lose one of the writes.
"""

from typing import Any, Protocol

from task_tracker.domain.shared.result import Result
from task_tracker.domain.task.models import Task

TaskRecord = dict[str, Any]


class RecordStore(Protocol):
    """Whole-collection storage for task records."""

    def load_records(self) -> Result[list[TaskRecord], str]:
        """Return every stored record."""
        ...

    def save_records(self, records: list[TaskRecord]) -> Result[None, str]:
        """Replace the stored collection with ``records``."""
        ...


class TaskRepository(Protocol):
    """Durable collection of tasks, unique by id.

    Raises:
        AlreadyExistsError: ``save`` with an id that is already stored.
        NotFoundError: ``find_by_id``, ``update`` or ``delete`` on a missing id.
        StoreError: The backing store failed or holds malformed data.
    """

    def save(self, task: Task) -> Task: ...

    def find_by_id(self, task_id: str) -> Task: ...

    def find_all(self) -> list[Task]: ...

    def update(self, task: Task) -> Task: ...

    def delete(self, task_id: str) -> None: ...

    def find_by_status(self, status: str) -> list[Task]: ...

    def find_by_priority(self, priority: str) -> list[Task]: ...

    def find_by_tag(self, tag: str) -> list[Task]: ...
