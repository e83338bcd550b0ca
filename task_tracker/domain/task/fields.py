"""Validated value fields composing a Task.

Immutable value objects compared by value, never by identity. Each field
type validates its invariants at construction and raises ValidationError
with a readable reason when they do not hold. Build fields through their
classmethod factories, which normalise raw input before validation.
"""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import ClassVar, Generic, TypeVar

from task_tracker.domain.shared.errors import ValidationError

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class ValidatedField(Generic[T]):
    """Immutable holder of a validated value.

    Equality requires the same ``kind`` and an equal value, so two field
    types wrapping the same raw value never compare equal.

    Attributes:
        value: The validated raw value.
    """

    value: T

    kind: ClassVar[str] = "field"

    def __post_init__(self) -> None:
        self._validate(self.value)

    def _validate(self, value: T) -> None:
        """Raise ValidationError if ``value`` breaks this field's invariants."""

    def _same_value(self, other: T) -> bool:
        return self.value == other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatedField):
            return NotImplemented
        return self.kind == other.kind and self._same_value(other.value)

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __str__(self) -> str:
        return str(self.value)


# =============================================================================
# Identifier
# =============================================================================


class TaskId(ValidatedField[str]):
    """Opaque unique identifier of a task."""

    kind = "task-id"

    @classmethod
    def generate(cls) -> "TaskId":
        """Create a fresh, globally unique identifier."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def of(cls, raw: str) -> "TaskId":
        """Restore an identifier from a persisted string."""
        return cls(raw)

    def _validate(self, value: str) -> None:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("Task ID cannot be empty")


# =============================================================================
# Description
# =============================================================================


class Description(ValidatedField[str]):
    """Free-text task description, 1 to 500 characters after trimming."""

    kind = "description"

    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 500

    @classmethod
    def create(cls, text: str) -> "Description":
        if not isinstance(text, str):
            raise ValidationError("Task description must be a string")
        return cls(text.strip())

    def _validate(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValidationError("Task description must be a string")
        if len(value.strip()) < self.MIN_LENGTH:
            raise ValidationError("Task description cannot be empty")
        if value != value.strip():
            raise ValidationError("Task description must be trimmed")
        if len(value) > self.MAX_LENGTH:
            raise ValidationError(
                f"Task description cannot exceed {self.MAX_LENGTH} characters"
            )


# =============================================================================
# Status
# =============================================================================


class StatusValue(str, Enum):
    """Canonical task status values."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class Status(ValidatedField[StatusValue]):
    """Current workflow status of a task."""

    kind = "status"

    @classmethod
    def todo(cls) -> "Status":
        return cls(StatusValue.TODO)

    @classmethod
    def in_progress(cls) -> "Status":
        return cls(StatusValue.IN_PROGRESS)

    @classmethod
    def done(cls) -> "Status":
        return cls(StatusValue.DONE)

    @classmethod
    def from_string(cls, status: str) -> "Status":
        """Parse a status case-insensitively (e.g. "In-Progress")."""
        if not isinstance(status, str):
            raise ValidationError(f"Invalid task status: {status!r}")
        try:
            return cls(StatusValue(status.strip().lower()))
        except ValueError:
            raise ValidationError(
                f"Invalid task status: {status}. Must be one of: todo, in-progress, done"
            ) from None

    def _validate(self, value: StatusValue) -> None:
        if not isinstance(value, StatusValue):
            raise ValidationError(f"Invalid task status: {value!r}")

    def is_todo(self) -> bool:
        return self.value is StatusValue.TODO

    def is_in_progress(self) -> bool:
        return self.value is StatusValue.IN_PROGRESS

    def is_done(self) -> bool:
        return self.value is StatusValue.DONE

    def __str__(self) -> str:
        return self.value.value


# =============================================================================
# Priority
# =============================================================================


class PriorityValue(str, Enum):
    """Canonical task priority values."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def ordinal(self) -> int:
        """Numeric rank used for ordering (low=1, medium=2, high=3)."""
        return _PRIORITY_ORDINALS[self]


_PRIORITY_ORDINALS: dict[PriorityValue, int] = {
    PriorityValue.LOW: 1,
    PriorityValue.MEDIUM: 2,
    PriorityValue.HIGH: 3,
}


class Priority(ValidatedField[PriorityValue]):
    """Priority level of a task, ordered low < medium < high."""

    kind = "priority"

    @classmethod
    def low(cls) -> "Priority":
        return cls(PriorityValue.LOW)

    @classmethod
    def medium(cls) -> "Priority":
        return cls(PriorityValue.MEDIUM)

    @classmethod
    def high(cls) -> "Priority":
        return cls(PriorityValue.HIGH)

    @classmethod
    def from_string(cls, priority: str) -> "Priority":
        """Parse a priority case-insensitively (e.g. "HIGH")."""
        if not isinstance(priority, str):
            raise ValidationError(f"Invalid task priority: {priority!r}")
        try:
            return cls(PriorityValue(priority.strip().lower()))
        except ValueError:
            raise ValidationError(
                f"Invalid task priority: {priority}. Must be one of: low, medium, high"
            ) from None

    def _validate(self, value: PriorityValue) -> None:
        if not isinstance(value, PriorityValue):
            raise ValidationError(f"Invalid task priority: {value!r}")

    @property
    def ordinal(self) -> int:
        return self.value.ordinal

    def is_higher_than(self, other: "Priority") -> bool:
        return self.ordinal > other.ordinal

    def is_lower_than(self, other: "Priority") -> bool:
        return self.ordinal < other.ordinal

    def is_low(self) -> bool:
        return self.value is PriorityValue.LOW

    def is_medium(self) -> bool:
        return self.value is PriorityValue.MEDIUM

    def is_high(self) -> bool:
        return self.value is PriorityValue.HIGH

    def __str__(self) -> str:
        return self.value.value


# =============================================================================
# Due date
# =============================================================================


def calendar_day(moment: date | datetime) -> date:
    """Return the calendar day of ``moment``, discarding the time of day.

    Timezone-aware instants are converted to local time first so that
    the day matches what the user sees on their clock.
    """
    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            moment = moment.astimezone()
        return moment.date()
    return moment


def _reference_day(reference: date | datetime | None) -> date:
    return calendar_day(reference if reference is not None else datetime.now())


class DueDate(ValidatedField[date]):
    """Calendar day a task is due.

    All queries work at day granularity against either the current
    instant or an explicit ``reference`` instant.
    """

    kind = "due-date"

    @classmethod
    def create(cls, moment: date | datetime) -> "DueDate":
        if not isinstance(moment, date):
            raise ValidationError("Invalid date provided")
        return cls(calendar_day(moment))

    @classmethod
    def from_string(cls, text: str) -> "DueDate":
        """Parse an ISO-8601 date ("2025-03-01") or instant ("2025-03-01T09:00:00Z")."""
        if not isinstance(text, str):
            raise ValidationError("Invalid date provided")
        raw = text.strip()
        try:
            return cls(date.fromisoformat(raw))
        except ValueError:
            pass
        try:
            return cls.create(datetime.fromisoformat(raw))
        except ValueError:
            raise ValidationError(f"Invalid date provided: {text!r}") from None

    def _validate(self, value: date) -> None:
        if not isinstance(value, date) or isinstance(value, datetime):
            raise ValidationError("Invalid date provided")

    def is_overdue(self, reference: date | datetime | None = None) -> bool:
        """True when the due day is strictly before the reference day."""
        return self.value < _reference_day(reference)

    def is_due_today(self, reference: date | datetime | None = None) -> bool:
        return self.value == _reference_day(reference)

    def days_until_due(self, reference: date | datetime | None = None) -> int:
        """Whole days until the due day; negative when overdue."""
        return (self.value - _reference_day(reference)).days

    def to_date_string(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.to_date_string()


# =============================================================================
# Tags
# =============================================================================


class TagSet(ValidatedField[tuple[str, ...]]):
    """Unordered collection of distinct, trimmed tags.

    Insertion order is kept for display, but equality is set equality:
    ``{a, b}`` equals ``{b, a}``.
    """

    kind = "tags"

    MAX_TAG_LENGTH: ClassVar[int] = 50
    MAX_TAGS: ClassVar[int] = 20

    @classmethod
    def create(cls, tags: Iterable[str] = ()) -> "TagSet":
        """Build a tag set, trimming entries and dropping blanks and duplicates."""
        if isinstance(tags, str):
            raise ValidationError("Tags must be a collection of strings")
        unique: list[str] = []
        for tag in tags:
            if not isinstance(tag, str):
                raise ValidationError(f"Tag must be a string, got {tag!r}")
            trimmed = tag.strip()
            if trimmed and trimmed not in unique:
                unique.append(trimmed)
        return cls(tuple(unique))

    @classmethod
    def from_string(cls, tags: str) -> "TagSet":
        """Build a tag set from comma-separated text ("work, home")."""
        if not tags or not tags.strip():
            return cls.create()
        return cls.create(tags.split(","))

    def _validate(self, value: tuple[str, ...]) -> None:
        if not isinstance(value, tuple):
            raise ValidationError("Tags must be a tuple of strings")
        for tag in value:
            if not isinstance(tag, str) or not tag or tag != tag.strip():
                raise ValidationError(f"Tag cannot be empty or padded: {tag!r}")
            if len(tag) > self.MAX_TAG_LENGTH:
                raise ValidationError(
                    f'Tag "{tag}" exceeds {self.MAX_TAG_LENGTH} characters'
                )
        if len(set(value)) != len(value):
            raise ValidationError("Tags must be unique")
        if len(value) > self.MAX_TAGS:
            raise ValidationError(f"Cannot have more than {self.MAX_TAGS} tags")

    def _same_value(self, other: tuple[str, ...]) -> bool:
        return set(self.value) == set(other)

    def __hash__(self) -> int:
        return hash((self.kind, frozenset(self.value)))

    def __iter__(self):
        return iter(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def add(self, tag: str) -> "TagSet":
        """Return a set with ``tag`` added; the same set if already present."""
        trimmed = tag.strip()
        if not trimmed:
            raise ValidationError("Tag cannot be empty")
        if len(trimmed) > self.MAX_TAG_LENGTH:
            raise ValidationError(f"Tag cannot exceed {self.MAX_TAG_LENGTH} characters")
        if trimmed in self.value:
            return self
        if len(self.value) >= self.MAX_TAGS:
            raise ValidationError(f"Cannot add more than {self.MAX_TAGS} tags")
        return TagSet(self.value + (trimmed,))

    def remove(self, tag: str) -> "TagSet":
        trimmed = tag.strip()
        return TagSet(tuple(t for t in self.value if t != trimmed))

    def has(self, tag: str) -> bool:
        return tag.strip() in self.value

    def is_empty(self) -> bool:
        return not self.value

    def count(self) -> int:
        return len(self.value)

    def to_list(self) -> list[str]:
        return list(self.value)

    def to_comma_separated(self) -> str:
        return ", ".join(self.value)

    def __str__(self) -> str:
        return self.to_comma_separated()
