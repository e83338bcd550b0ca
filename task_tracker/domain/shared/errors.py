"""Typed errors raised by the task tracker core.

Every error carries a stable ``code`` so collaborators (CLI, exporters) can
branch on the failure kind without string matching.

    ValidationError    - a value field's invariant was violated
    NotFoundError      - repository lookup/update/delete on a missing id
    AlreadyExistsError - repository save with a duplicate id
    StoreError         - the backing store failed or holds malformed content
"""

from typing import Any


class TaskTrackerError(Exception):
    """Base class for all task tracker errors."""

    code = "TASK_TRACKER_ERROR"

    def to_dict(self) -> dict[str, Any]:
        """Serializable view of the error for reporting."""
        return {"name": type(self).__name__, "code": self.code, "message": str(self)}


class ValidationError(TaskTrackerError):
    """A field value failed its construction-time validation.

    Attributes:
        reason: Human-readable description of the violated rule.
    """

    code = "INVALID_TASK"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid task: {reason}")
        self.reason = reason


class NotFoundError(TaskTrackerError):
    """No task with the requested id exists in the repository."""

    code = "TASK_NOT_FOUND"

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with ID '{task_id}' was not found")
        self.task_id = task_id


class AlreadyExistsError(TaskTrackerError):
    """A task with the same id is already stored."""

    code = "TASK_ALREADY_EXISTS"

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with ID '{task_id}' already exists")
        self.task_id = task_id


class StoreError(TaskTrackerError):
    """The backing store could not be read or written.

    The original exception, when there is one, is chained as ``__cause__``.

    Attributes:
        operation: Repository operation that failed (e.g. "save task").
        detail: Description of the underlying failure.
    """

    code = "STORE_FAILURE"

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(f"Failed to {operation}: {detail}")
        self.operation = operation
        self.detail = detail
