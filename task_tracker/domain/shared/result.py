"""Result type for storage operations that can fail.

Low-level stores report I/O problems as values instead of raising, so the
repository layer decides how each failure surfaces to callers.

Example usage:
    >>> def read_count(path: str) -> Result[int, str]:
    ...     if not path:
    ...         return Err("No path given")
    ...     return Ok(3)
    ...
    >>> result = read_count("tasks.json")
    >>> if isinstance(result, Ok):
    ...     print(f"Loaded {result.value} records")
    Loaded 3 records
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


# Union keeps the alias subscriptable at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007
