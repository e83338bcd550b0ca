"""Multi-criteria search over tasks.

Filtering is a strict AND of the supplied criteria; omitted criteria
impose no constraint. Sorting uses a per-field comparator and is stable,
so equal tasks keep their input order.

All functions in this module are pure - no I/O, no side effects.
"""

import locale
import unicodedata
from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime
from functools import cmp_to_key
from typing import Literal

from pydantic import BaseModel, Field

from .fields import PriorityValue, StatusValue
from .models import Task

SortField = Literal["priority", "dueDate", "createdAt", "updatedAt", "description"]
SortOrder = Literal["asc", "desc"]

Comparator = Callable[[Task, Task], int]


class SearchCriteria(BaseModel):
    """Search and filter options.

    Attributes:
        status: Keep only tasks with this status.
        priority: Keep only tasks with this priority.
        tags: Keep tasks carrying at least one of these tags. An empty
            list imposes no constraint.
        keyword: Case-insensitive substring of the description.
        is_overdue: Keep only tasks whose overdue flag matches.
        is_done: Keep only tasks whose done flag matches.
        sort_by: Field to sort on; input order is kept when omitted.
        sort_order: "asc" (default) or "desc".
    """

    status: StatusValue | None = None
    priority: PriorityValue | None = None
    tags: list[str] = Field(default_factory=list)
    keyword: str | None = None
    is_overdue: bool | None = None
    is_done: bool | None = None
    sort_by: SortField | None = None
    sort_order: SortOrder = "asc"

    model_config = {"frozen": True}


# =============================================================================
# Filtering
# =============================================================================


def matches(
    task: Task,
    criteria: SearchCriteria,
    reference: date | datetime | None = None,
) -> bool:
    """Check a single task against every supplied criterion."""
    if criteria.status is not None and task.status.value is not criteria.status:
        return False

    if criteria.priority is not None and task.priority.value is not criteria.priority:
        return False

    if criteria.tags and not any(tag in task.tags.value for tag in criteria.tags):
        return False

    if criteria.keyword:
        if criteria.keyword.lower() not in task.description.value.lower():
            return False

    if criteria.is_overdue is not None and task.is_overdue(reference) != criteria.is_overdue:
        return False

    if criteria.is_done is not None and task.is_done() != criteria.is_done:
        return False

    return True


def apply_filters(
    tasks: Iterable[Task],
    criteria: SearchCriteria,
    reference: date | datetime | None = None,
) -> list[Task]:
    """Keep the tasks matching ``criteria``, preserving input order."""
    return [task for task in tasks if matches(task, criteria, reference)]


# =============================================================================
# Sorting
# =============================================================================


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _by_priority(a: Task, b: Task) -> int:
    return _sign(a.priority.ordinal - b.priority.ordinal)


def _by_created_at(a: Task, b: Task) -> int:
    return _sign((a.created_at - b.created_at).total_seconds())


def _by_updated_at(a: Task, b: Task) -> int:
    return _sign((a.updated_at - b.updated_at).total_seconds())


def _base_letters(text: str) -> str:
    """Casefolded text with accents removed ("Éclair" -> "eclair")."""
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def _by_description(a: Task, b: Task) -> int:
    # Base letters decide first; accents, then case, break ties.
    left, right = a.description.value, b.description.value
    for key in (_base_letters, str.casefold, str):
        result = locale.strcoll(key(left), key(right))
        if result:
            return _sign(result)
    return 0


_COMPARATORS: dict[str, Comparator] = {
    "priority": _by_priority,
    "createdAt": _by_created_at,
    "updatedAt": _by_updated_at,
    "description": _by_description,
}


def _due_date_comparator(direction: int) -> Comparator:
    # Undated tasks stay last in both directions; only dated pairs flip.
    def compare(a: Task, b: Task) -> int:
        if a.due_date is None and b.due_date is None:
            return 0
        if a.due_date is None:
            return 1
        if b.due_date is None:
            return -1
        return direction * _sign((a.due_date.value - b.due_date.value).days)

    return compare


def comparator_for(sort_by: SortField, sort_order: SortOrder = "asc") -> Comparator:
    """Build the comparator for ``sort_by`` in the requested direction."""
    direction = -1 if sort_order == "desc" else 1
    if sort_by == "dueDate":
        return _due_date_comparator(direction)

    base = _COMPARATORS[sort_by]

    def compare(a: Task, b: Task) -> int:
        return direction * base(a, b)

    return compare


def apply_sorting(tasks: Sequence[Task], criteria: SearchCriteria) -> list[Task]:
    """Sort by ``criteria.sort_by``; returns input order when it is unset."""
    if criteria.sort_by is None:
        return list(tasks)
    compare = comparator_for(criteria.sort_by, criteria.sort_order)
    return sorted(tasks, key=cmp_to_key(compare))


def search(
    tasks: Iterable[Task],
    criteria: SearchCriteria,
    reference: date | datetime | None = None,
) -> list[Task]:
    """Filter then sort ``tasks`` according to ``criteria``."""
    return apply_sorting(apply_filters(tasks, criteria, reference), criteria)
