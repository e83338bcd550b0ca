"""Application service layer for the task tracker.

Use-case functions that combine domain operations with a TaskRepository,
plus the request/response models they exchange with callers.

Example usage:
    >>> from task_tracker.application import CreateTaskRequest, create_task
    >>> from task_tracker.infrastructure import MemoryStore, StoredTaskRepository
    >>>
    >>> repo = StoredTaskRepository(MemoryStore())
    >>> created = create_task(repo, CreateTaskRequest(description="Write report"))
    >>> created.status
    'todo'
"""

from task_tracker.application.export import render_csv, render_json
from task_tracker.application.schemas import (
    CreateTaskRequest,
    ExportFormat,
    PriorityCounts,
    StatusCounts,
    TaskResponse,
    TaskStatistics,
    UpdateTaskRequest,
)
from task_tracker.application.task_service import (
    change_status,
    create_task,
    delete_task,
    export_tasks,
    get_statistics,
    get_task,
    list_tasks,
    next_tasks,
    search_tasks,
    update_task,
)

__all__ = [
    # Use cases
    "create_task",
    "get_task",
    "update_task",
    "change_status",
    "delete_task",
    "list_tasks",
    "search_tasks",
    "next_tasks",
    "get_statistics",
    "export_tasks",
    # Schemas
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "TaskResponse",
    "TaskStatistics",
    "StatusCounts",
    "PriorityCounts",
    "ExportFormat",
    # Rendering
    "render_json",
    "render_csv",
]
