"""In-process record store, used by tests and throwaway sessions."""

import copy

from task_tracker.domain.repository import TaskRecord
from task_tracker.domain.shared.result import Ok, Result


class MemoryStore:
    """Keeps the record collection in a list.

    Records are deep-copied in and out so callers never share mutable
    state with the store, mirroring what a file round-trip gives.
    """

    def __init__(self, records: list[TaskRecord] | None = None) -> None:
        self._records: list[TaskRecord] = copy.deepcopy(records or [])

    def load_records(self) -> Result[list[TaskRecord], str]:
        return Ok(copy.deepcopy(self._records))

    def save_records(self, records: list[TaskRecord]) -> Result[None, str]:
        self._records = copy.deepcopy(records)
        return Ok(None)
