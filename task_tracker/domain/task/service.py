"""Domain queries over collections of tasks.

All functions in this module are pure - no I/O, no side effects.
They never mutate their input and never raise domain errors.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from pydantic import BaseModel

from .fields import Priority, Status
from .models import Task


class TaskStats(BaseModel):
    """Task counts partitioned by status, plus an independent overdue count.

    ``todo + in_progress + done == total`` always holds; ``overdue`` may
    overlap any status bucket.
    """

    total: int = 0
    todo: int = 0
    in_progress: int = 0
    done: int = 0
    overdue: int = 0

    model_config = {"frozen": True}


def by_status(tasks: Iterable[Task], status: Status) -> list[Task]:
    """Tasks whose status equals ``status``, in input order."""
    return [task for task in tasks if task.status == status]


def by_priority(tasks: Iterable[Task], priority: Priority) -> list[Task]:
    """Tasks whose priority equals ``priority``, in input order."""
    return [task for task in tasks if task.priority == priority]


def overdue(
    tasks: Iterable[Task],
    reference: date | datetime | None = None,
) -> list[Task]:
    """Tasks with a due day before the reference day (today by default)."""
    return [task for task in tasks if task.is_overdue(reference)]


def statistics(
    tasks: Iterable[Task],
    reference: date | datetime | None = None,
) -> TaskStats:
    """Count tasks by status and overdue flag in a single pass."""
    total = todo = in_progress = done = late = 0
    for task in tasks:
        total += 1
        if task.is_done():
            done += 1
        elif task.is_in_progress():
            in_progress += 1
        else:
            todo += 1

        if task.is_overdue(reference):
            late += 1

    return TaskStats(
        total=total,
        todo=todo,
        in_progress=in_progress,
        done=done,
        overdue=late,
    )


def rank_by_urgency(tasks: Sequence[Task]) -> list[Task]:
    """Order tasks by how soon they demand attention.

    Higher priority first; within a priority tier, sooner due date first,
    with undated tasks after every dated one. Ties keep their input order.
    """

    def urgency(task: Task) -> tuple[int, bool, date]:
        due = task.due_date.value if task.due_date else date.max
        return (-task.priority.ordinal, task.due_date is None, due)

    return sorted(tasks, key=urgency)


def is_valid_status_transition(from_status: Status, to_status: Status) -> bool:
    """Workflow policy hook for status changes.

    Every transition is permitted, including reopening a done task and
    moving to the current status.
    """
    return True
