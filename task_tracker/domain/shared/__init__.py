"""Shared domain building blocks.

- Result type returned by low-level stores
- Typed error hierarchy used across all layers

Example usage:
    >>> from task_tracker.domain.shared import NotFoundError
    >>> NotFoundError("t1").code
    'TASK_NOT_FOUND'
"""

from task_tracker.domain.shared.errors import (
    AlreadyExistsError,
    NotFoundError,
    StoreError,
    TaskTrackerError,
    ValidationError,
)
from task_tracker.domain.shared.result import (
    Err,
    Ok,
    Result,
)

__all__ = [
    # Result type
    "Ok",
    "Err",
    "Result",
    # Errors
    "TaskTrackerError",
    "ValidationError",
    "NotFoundError",
    "AlreadyExistsError",
    "StoreError",
]
