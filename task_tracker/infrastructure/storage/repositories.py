"""Task repository backed by a whole-collection record store.

Each mutating call loads the full record list, changes it in memory and
writes the full list back. There is no locking: two repositories mutating
the same store concurrently can interleave and lose an update.
"""

import logging
from typing import Any

from task_tracker.domain.repository import RecordStore, TaskRecord
from task_tracker.domain.shared.errors import (
    AlreadyExistsError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from task_tracker.domain.shared.result import Err
from task_tracker.domain.task import Priority, Status, Task, by_priority, by_status

logger = logging.getLogger(__name__)


def task_to_record(task: Task) -> TaskRecord:
    """Convert a Task into its persisted record shape."""
    return task.to_primitive()


def record_to_task(record: TaskRecord) -> Task:
    """Rebuild a Task from a persisted record, re-validating every field.

    Raises:
        ValidationError: If a field value is invalid.
        KeyError: If a required key is missing.
    """
    return Task.restore(
        id=record["id"],
        description=record["description"],
        status=record["status"],
        priority=record["priority"],
        due_date=record.get("dueDate"),
        tags=record["tags"],
        created_at=record["createdAt"],
        updated_at=record["updatedAt"],
    )


def _record_id(record: Any) -> Any:
    return record.get("id") if isinstance(record, dict) else None


class StoredTaskRepository:
    """Repository for task persistence over a ``RecordStore``.

    Enforces "at most one record per id" in :meth:`_locate`, which every
    lookup and mutation goes through.
    """

    def __init__(self, store: RecordStore) -> None:
        """Initialize the repository.

        Args:
            store: Store holding the record collection (JSON file, memory...).
        """
        self._store = store

    # -------------------------------------------------------------------------
    # Store access
    # -------------------------------------------------------------------------

    def _read(self, operation: str) -> list[TaskRecord]:
        result = self._store.load_records()
        if isinstance(result, Err):
            raise StoreError(operation, result.error)
        return result.value

    def _write(self, records: list[TaskRecord], operation: str) -> None:
        result = self._store.save_records(records)
        if isinstance(result, Err):
            raise StoreError(operation, result.error)

    def _to_task(self, record: TaskRecord, operation: str) -> Task:
        try:
            return record_to_task(record)
        except (ValidationError, KeyError, TypeError, AttributeError) as e:
            raise StoreError(
                operation, f"corrupt record {_record_id(record)!r}: {e}"
            ) from e

    @staticmethod
    def _locate(records: list[TaskRecord], task_id: str) -> int | None:
        """Index of the record with ``task_id``, or None when absent."""
        for index, record in enumerate(records):
            if _record_id(record) == task_id:
                return index
        return None

    # -------------------------------------------------------------------------
    # Repository operations
    # -------------------------------------------------------------------------

    def save(self, task: Task) -> Task:
        """Store a new task.

        Raises:
            AlreadyExistsError: If a record with the same id exists.
        """
        records = self._read("save task")
        if self._locate(records, task.id.value) is not None:
            raise AlreadyExistsError(task.id.value)

        records.append(task_to_record(task))
        self._write(records, "save task")
        logger.info(f"Saved task {task.id}")
        return task

    def find_by_id(self, task_id: str) -> Task:
        """Load one task.

        Raises:
            NotFoundError: If no record has ``task_id``.
        """
        records = self._read("find task by id")
        index = self._locate(records, task_id)
        if index is None:
            raise NotFoundError(task_id)
        return self._to_task(records[index], "find task by id")

    def find_all(self) -> list[Task]:
        """Load every task in stored order."""
        records = self._read("find all tasks")
        return [self._to_task(record, "find all tasks") for record in records]

    def update(self, task: Task) -> Task:
        """Replace the stored record for ``task.id``.

        Raises:
            NotFoundError: If the task was never saved.
        """
        records = self._read("update task")
        index = self._locate(records, task.id.value)
        if index is None:
            raise NotFoundError(task.id.value)

        records[index] = task_to_record(task)
        self._write(records, "update task")
        logger.info(f"Updated task {task.id}")
        return task

    def delete(self, task_id: str) -> None:
        """Remove the record for ``task_id``.

        Raises:
            NotFoundError: If no record has ``task_id``.
        """
        records = self._read("delete task")
        index = self._locate(records, task_id)
        if index is None:
            raise NotFoundError(task_id)

        del records[index]
        self._write(records, "delete task")
        logger.info(f"Deleted task {task_id}")

    def find_by_status(self, status: str) -> list[Task]:
        return by_status(self.find_all(), Status.from_string(status))

    def find_by_priority(self, priority: str) -> list[Task]:
        return by_priority(self.find_all(), Priority.from_string(priority))

    def find_by_tag(self, tag: str) -> list[Task]:
        """Tasks carrying exactly ``tag`` (case-sensitive)."""
        return [task for task in self.find_all() if tag in task.tags.value]
