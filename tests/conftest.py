"""Shared test fixtures."""

from datetime import date

import pytest

from task_tracker.domain.task import Task
from task_tracker.infrastructure import JsonFileStore, MemoryStore, StoredTaskRepository


def _make_task(
    description: str = "Write report",
    *,
    id: str | None = None,
    status: str = "todo",
    priority: str = "medium",
    due_date: str | None = None,
    tags: tuple[str, ...] = (),
    created_at: str = "2025-03-01T09:00:00+00:00",
    updated_at: str | None = None,
) -> Task:
    return Task.restore(
        id=id or description.lower().replace(" ", "-"),
        description=description,
        status=status,
        priority=priority,
        due_date=due_date,
        tags=tags,
        created_at=created_at,
        updated_at=updated_at or created_at,
    )


@pytest.fixture()
def make_task():
    """Factory for tasks with fixed timestamps, so ordering is deterministic."""
    return _make_task


@pytest.fixture()
def today() -> date:
    """Reference day used instead of the wall clock."""
    return date(2025, 3, 10)


@pytest.fixture()
def memory_repo() -> StoredTaskRepository:
    return StoredTaskRepository(MemoryStore())


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture()
def file_repo(db_path) -> StoredTaskRepository:
    return StoredTaskRepository(JsonFileStore(db_path))
