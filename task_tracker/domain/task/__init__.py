"""Task domain - the task model and its query engine.

All exports are pure (no I/O, no side effects).

Key Types:
    Task - Aggregate root, immutable with copy-on-write updates
    TaskId, Description, Status, Priority, DueDate, TagSet - Validated fields
    StatusValue, PriorityValue - Canonical enum values
    TaskStats - Status/overdue counts
    SearchCriteria - Filter and sort options

Domain Service Functions:
    by_status - Filter by status
    by_priority - Filter by priority
    overdue - Filter to overdue tasks
    statistics - Count by status and overdue flag
    rank_by_urgency - Sort by priority then due date
    is_valid_status_transition - Status workflow policy

Search Functions:
    search - Filter then sort
    apply_filters - Strict AND of criteria
    apply_sorting - Per-field stable sort
"""

from .fields import (
    Description,
    DueDate,
    Priority,
    PriorityValue,
    Status,
    StatusValue,
    TagSet,
    TaskId,
    ValidatedField,
    calendar_day,
)
from .models import Task, parse_instant, utc_now
from .query import (
    SearchCriteria,
    SortField,
    SortOrder,
    apply_filters,
    apply_sorting,
    comparator_for,
    matches,
    search,
)
from .service import (
    TaskStats,
    by_priority,
    by_status,
    is_valid_status_transition,
    overdue,
    rank_by_urgency,
    statistics,
)

__all__ = [
    # Fields
    "ValidatedField",
    "TaskId",
    "Description",
    "Status",
    "StatusValue",
    "Priority",
    "PriorityValue",
    "DueDate",
    "TagSet",
    "calendar_day",
    # Aggregate
    "Task",
    "parse_instant",
    "utc_now",
    # Domain service
    "TaskStats",
    "by_status",
    "by_priority",
    "overdue",
    "statistics",
    "rank_by_urgency",
    "is_valid_status_transition",
    # Search
    "SearchCriteria",
    "SortField",
    "SortOrder",
    "matches",
    "apply_filters",
    "apply_sorting",
    "comparator_for",
    "search",
]
