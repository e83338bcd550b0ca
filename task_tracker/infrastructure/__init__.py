"""Infrastructure layer for the task tracker.

I/O lives here: configuration, record stores and the repository that turns
store results into domain errors.

Exports:
    Config:
        - Settings: Resolved configuration
        - load_settings: Read settings from the environment

    Storage:
        - JsonFileStore: JSON array in a single file
        - MemoryStore: In-process record list
        - StoredTaskRepository: TaskRepository over a record store
"""

from task_tracker.infrastructure.config import Settings, load_settings
from task_tracker.infrastructure.storage import (
    JsonFileStore,
    MemoryStore,
    StoredTaskRepository,
)

__all__ = [
    # Config
    "Settings",
    "load_settings",
    # Storage
    "JsonFileStore",
    "MemoryStore",
    "StoredTaskRepository",
]
