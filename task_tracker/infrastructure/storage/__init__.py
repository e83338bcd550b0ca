"""Storage infrastructure: record stores and the task repository."""

from task_tracker.infrastructure.storage.json_storage import JsonFileStore
from task_tracker.infrastructure.storage.memory_storage import MemoryStore
from task_tracker.infrastructure.storage.repositories import (
    StoredTaskRepository,
    record_to_task,
    task_to_record,
)

__all__ = [
    "JsonFileStore",
    "MemoryStore",
    "StoredTaskRepository",
    "record_to_task",
    "task_to_record",
]
