"""Request/response models for task use cases.

These Pydantic models are the contract between the application services and
their callers (CLI, exporters). They are separate from the domain model in
task_tracker.domain.task; the response projection adds the derived
``isOverdue`` and ``isDone`` flags, which are never stored.
"""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from task_tracker.domain.task import Task

ExportFormat = Literal["json", "csv"]


class CreateTaskRequest(BaseModel):
    """Request to create a new task."""

    description: str
    priority: Optional[str] = None
    due_date: Optional[str | date] = None
    tags: list[str] = Field(default_factory=list)


class UpdateTaskRequest(BaseModel):
    """Request to update an existing task.

    Only supplied fields change. ``tags`` replaces the whole tag set;
    ``clear_due_date`` removes the due date.
    """

    id: str
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[str | date] = None
    clear_due_date: bool = False
    tags: Optional[list[str]] = None

    def has_changes(self) -> bool:
        return any(
            value is not None
            for value in (self.description, self.status, self.priority, self.due_date, self.tags)
        ) or self.clear_due_date


class TaskResponse(BaseModel):
    """Serializable view of a task for presentation and export."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    description: str
    status: str
    priority: str
    due_date: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    created_at: str
    updated_at: str
    is_overdue: bool = False
    is_done: bool = False

    @classmethod
    def from_task(
        cls,
        task: Task,
        reference: date | datetime | None = None,
    ) -> "TaskResponse":
        primitive = task.to_primitive()
        return cls(
            id=primitive["id"],
            description=primitive["description"],
            status=primitive["status"],
            priority=primitive["priority"],
            due_date=primitive["dueDate"],
            tags=primitive["tags"],
            created_at=primitive["createdAt"],
            updated_at=primitive["updatedAt"],
            is_overdue=task.is_overdue(reference),
            is_done=task.is_done(),
        )


class StatusCounts(BaseModel):
    todo: int = 0
    in_progress: int = 0
    done: int = 0


class PriorityCounts(BaseModel):
    low: int = 0
    medium: int = 0
    high: int = 0


class TaskStatistics(BaseModel):
    """Summary of the whole task collection."""

    total_tasks: int
    by_status: StatusCounts
    by_priority: PriorityCounts
    completed_tasks: int
    overdue_tasks: int
    completion_percentage: int
    all_tags: list[str]
    tag_counts: dict[str, int]
    average_tags_per_task: float
    tasks_with_due_date: int
    tasks_without_due_date: int
