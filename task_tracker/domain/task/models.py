"""Task aggregate root.

A Task composes the validated fields from ``fields.py``. It is immutable:
every update returns a new Task with ``updated_at`` refreshed, while ``id``
and ``created_at`` stay fixed for the life of the task.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from typing import Any

from task_tracker.domain.shared.errors import ValidationError

from .fields import (
    Description,
    DueDate,
    Priority,
    Status,
    StatusValue,
    TagSet,
    TaskId,
)

DueDateInput = date | datetime | str | None


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def parse_instant(value: datetime | str, name: str = "timestamp") -> datetime:
    """Parse an ISO-8601 instant, assuming UTC when no offset is given.

    Raises:
        ValidationError: If ``value`` is neither a datetime nor a valid
            ISO-8601 string.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError(f"Invalid {name}: {value!r}") from None
    else:
        raise ValidationError(f"Invalid {name}: {value!r}")
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment


def _due_date(value: DueDateInput) -> DueDate | None:
    if value is None:
        return None
    if isinstance(value, str):
        return DueDate.from_string(value)
    return DueDate.create(value)


def _priority(value: str | None) -> Priority:
    if value is None:
        return Priority.medium()
    return Priority.from_string(value)


@dataclass(frozen=True, eq=False)
class Task:
    """A tracked unit of work.

    Build instances with :meth:`create` (new task) or :meth:`restore`
    (persisted task). Equality is identity; matching tasks by id is the
    repository's job.
    """

    id: TaskId
    description: Description
    status: Status
    priority: Priority
    due_date: DueDate | None
    tags: TagSet
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        description: str,
        priority: str | None = None,
        due_date: DueDateInput = None,
        tags: Iterable[str] = (),
    ) -> "Task":
        """Create a new todo task with a fresh id.

        Args:
            description: Task text, 1-500 characters after trimming.
            priority: "low", "medium" or "high"; medium when omitted.
            due_date: Optional due day (date, datetime or ISO string).
            tags: Optional tags.

        Raises:
            ValidationError: If any field is invalid.
        """
        now = utc_now()
        return cls(
            id=TaskId.generate(),
            description=Description.create(description),
            status=Status.todo(),
            priority=_priority(priority),
            due_date=_due_date(due_date),
            tags=TagSet.create(tags),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def restore(
        cls,
        id: str,
        description: str,
        status: str,
        priority: str,
        due_date: DueDateInput,
        tags: Iterable[str],
        created_at: datetime | str,
        updated_at: datetime | str,
    ) -> "Task":
        """Rebuild a task from persisted values, re-validating every field.

        Raises:
            ValidationError: If any persisted value is corrupt.
        """
        return cls(
            id=TaskId.of(id),
            description=Description.create(description),
            status=Status.from_string(status),
            priority=Priority.from_string(priority),
            due_date=_due_date(due_date),
            tags=TagSet.create(tags),
            created_at=parse_instant(created_at, "createdAt"),
            updated_at=parse_instant(updated_at, "updatedAt"),
        )

    # -------------------------------------------------------------------------
    # Copy-on-write updates
    # -------------------------------------------------------------------------

    def _touch(self, **changes: Any) -> "Task":
        return replace(self, updated_at=utc_now(), **changes)

    def update_description(self, description: str) -> "Task":
        return self._touch(description=Description.create(description))

    def update_status(self, status: str | StatusValue) -> "Task":
        return self._touch(status=Status.from_string(status))

    def update_priority(self, priority: str) -> "Task":
        return self._touch(priority=Priority.from_string(priority))

    def update_due_date(self, due_date: DueDateInput) -> "Task":
        """Set a new due date, or clear it with None."""
        return self._touch(due_date=_due_date(due_date))

    def update_tags(self, tags: Iterable[str]) -> "Task":
        """Replace all tags."""
        return self._touch(tags=TagSet.create(tags))

    def add_tag(self, tag: str) -> "Task":
        return self._touch(tags=self.tags.add(tag))

    def remove_tag(self, tag: str) -> "Task":
        return self._touch(tags=self.tags.remove(tag))

    def mark_as_todo(self) -> "Task":
        return self.update_status(StatusValue.TODO)

    def mark_as_in_progress(self) -> "Task":
        return self.update_status(StatusValue.IN_PROGRESS)

    def mark_as_done(self) -> "Task":
        return self.update_status(StatusValue.DONE)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_overdue(self, reference: date | datetime | None = None) -> bool:
        """True if a due date is set and its day is before the reference day."""
        return self.due_date is not None and self.due_date.is_overdue(reference)

    def is_done(self) -> bool:
        return self.status.is_done()

    def is_in_progress(self) -> bool:
        return self.status.is_in_progress()

    def is_todo(self) -> bool:
        return self.status.is_todo()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_primitive(self) -> dict[str, Any]:
        """Plain serializable snapshot in the persisted record shape."""
        return {
            "id": self.id.value,
            "description": self.description.value,
            "status": str(self.status),
            "priority": str(self.priority),
            "dueDate": self.due_date.to_date_string() if self.due_date else None,
            "tags": self.tags.to_list(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    def __str__(self) -> str:
        return (
            f'Task(id={self.id}, description="{self.description}", '
            f"status={self.status}, priority={self.priority})"
        )
