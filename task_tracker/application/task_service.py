"""Task application services.

Orchestrates task use cases by combining domain functions with a
TaskRepository. Domain errors (ValidationError, NotFoundError,
AlreadyExistsError, StoreError) propagate to the caller unchanged.
"""

import logging
import math
from collections import Counter
from datetime import date, datetime

from task_tracker.domain.repository import TaskRepository
from task_tracker.domain.shared.errors import ValidationError
from task_tracker.domain.task import (
    Priority,
    PriorityValue,
    SearchCriteria,
    SortField,
    SortOrder,
    Status,
    Task,
    is_valid_status_transition,
    rank_by_urgency,
    search,
    statistics,
)

from .export import render_csv, render_json
from .schemas import (
    CreateTaskRequest,
    ExportFormat,
    PriorityCounts,
    StatusCounts,
    TaskResponse,
    TaskStatistics,
    UpdateTaskRequest,
)

logger = logging.getLogger(__name__)


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def _responses(
    tasks: list[Task],
    reference: date | datetime | None = None,
) -> list[TaskResponse]:
    return [TaskResponse.from_task(task, reference) for task in tasks]


def create_task(repo: TaskRepository, request: CreateTaskRequest) -> TaskResponse:
    """Create and store a new task.

    Raises:
        ValidationError: If any field is invalid.
    """
    task = Task.create(
        request.description,
        priority=request.priority,
        due_date=request.due_date,
        tags=request.tags,
    )
    repo.save(task)
    logger.info(f"Created task {task.id}")
    return TaskResponse.from_task(task)


def get_task(repo: TaskRepository, task_id: str) -> TaskResponse:
    return TaskResponse.from_task(repo.find_by_id(task_id))


def update_task(repo: TaskRepository, request: UpdateTaskRequest) -> TaskResponse:
    """Apply the supplied changes to a stored task.

    Each supplied field goes through the matching copy-on-write update on
    the Task, and the result replaces the stored record.

    Raises:
        NotFoundError: If the task does not exist.
        ValidationError: If a new value is invalid or the status change is
            refused by the workflow policy.
    """
    task = repo.find_by_id(request.id)

    if request.description is not None:
        task = task.update_description(request.description)

    if request.status is not None:
        target = Status.from_string(request.status)
        if not is_valid_status_transition(task.status, target):
            raise ValidationError(f"Cannot change status from {task.status} to {target}")
        task = task.update_status(request.status)

    if request.priority is not None:
        task = task.update_priority(request.priority)

    if request.clear_due_date:
        task = task.update_due_date(None)
    elif request.due_date is not None:
        task = task.update_due_date(request.due_date)

    if request.tags is not None:
        task = task.update_tags(request.tags)

    repo.update(task)
    return TaskResponse.from_task(task)


def change_status(repo: TaskRepository, task_id: str, status: str) -> TaskResponse:
    """Shortcut for a status-only update."""
    return update_task(repo, UpdateTaskRequest(id=task_id, status=status))


def delete_task(repo: TaskRepository, task_id: str) -> None:
    repo.delete(task_id)
    logger.info(f"Deleted task {task_id}")


def list_tasks(
    repo: TaskRepository,
    status: str | None = None,
    priority: str | None = None,
    sort_by: SortField | None = None,
    sort_order: SortOrder = "asc",
) -> list[TaskResponse]:
    """List stored tasks, optionally filtered and sorted.

    Raises:
        ValidationError: If ``status`` or ``priority`` is not a known value.
    """
    criteria = SearchCriteria(
        status=Status.from_string(status).value if status else None,
        priority=Priority.from_string(priority).value if priority else None,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return _responses(search(repo.find_all(), criteria))


def search_tasks(
    repo: TaskRepository,
    criteria: SearchCriteria,
    reference: date | datetime | None = None,
) -> list[TaskResponse]:
    """Filter and sort stored tasks by ``criteria``."""
    tasks = search(repo.find_all(), criteria, reference)
    logger.debug(f"Search matched {len(tasks)} tasks")
    return _responses(tasks, reference)


def next_tasks(repo: TaskRepository, limit: int | None = None) -> list[TaskResponse]:
    """Open tasks ranked by urgency, most urgent first."""
    ranked = rank_by_urgency([task for task in repo.find_all() if not task.is_done()])
    if limit is not None:
        ranked = ranked[:limit]
    return _responses(ranked)


def get_statistics(
    repo: TaskRepository,
    reference: date | datetime | None = None,
) -> TaskStatistics:
    """Summarise the stored task collection."""
    tasks = repo.find_all()
    stats = statistics(tasks, reference)

    priorities = Counter(task.priority.value for task in tasks)
    tag_counts = Counter(tag for task in tasks for tag in task.tags)
    with_due_date = sum(1 for task in tasks if task.due_date is not None)

    if stats.total:
        completion = int(_round_half_up(stats.done / stats.total * 100))
        average_tags = _round_half_up(sum(tag_counts.values()) / stats.total, 1)
    else:
        completion = 0
        average_tags = 0.0

    return TaskStatistics(
        total_tasks=stats.total,
        by_status=StatusCounts(
            todo=stats.todo,
            in_progress=stats.in_progress,
            done=stats.done,
        ),
        by_priority=PriorityCounts(
            low=priorities[PriorityValue.LOW],
            medium=priorities[PriorityValue.MEDIUM],
            high=priorities[PriorityValue.HIGH],
        ),
        completed_tasks=stats.done,
        overdue_tasks=stats.overdue,
        completion_percentage=completion,
        all_tags=sorted(tag_counts),
        tag_counts=dict(tag_counts),
        average_tags_per_task=average_tags,
        tasks_with_due_date=with_due_date,
        tasks_without_due_date=stats.total - with_due_date,
    )


def export_tasks(
    repo: TaskRepository,
    fmt: ExportFormat,
    pretty: bool = True,
    include_headers: bool = True,
) -> str:
    """Render every stored task as JSON or CSV text.

    Raises:
        ValueError: If ``fmt`` is not a supported format.
    """
    responses = _responses(repo.find_all())
    if fmt == "json":
        return render_json(responses, pretty=pretty)
    if fmt == "csv":
        return render_csv(responses, include_headers=include_headers)
    raise ValueError(f"Unsupported export format: {fmt}")
