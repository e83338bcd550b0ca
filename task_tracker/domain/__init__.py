"""Domain layer for the task tracker.

Pure model and query code: value fields, the Task aggregate, the domain
query/ranking service, the search engine, and the repository contracts.
Nothing in this package performs I/O.
"""

from task_tracker.domain.repository import RecordStore, TaskRecord, TaskRepository

__all__ = ["RecordStore", "TaskRecord", "TaskRepository"]
