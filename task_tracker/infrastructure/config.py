"""Runtime configuration for the task tracker.

Settings come from environment variables with per-user defaults:

    TASK_TRACKER_DATA_DIR   data directory (default ~/.task-tracker)
    TASK_TRACKER_DB_FILE    store file name inside it (default tasks.json)
    TASK_TRACKER_LOG_LEVEL  logging level name (default WARNING)

The CLI ``--db`` option (or TASK_TRACKER_DB) overrides the store path.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_DATA_DIR = Path.home() / ".task-tracker"
DEFAULT_DB_FILE = "tasks.json"

ENV_DATA_DIR = "TASK_TRACKER_DATA_DIR"
ENV_DB_FILE = "TASK_TRACKER_DB_FILE"
ENV_LOG_LEVEL = "TASK_TRACKER_LOG_LEVEL"


class Settings(BaseModel):
    """Resolved configuration values."""

    data_dir: Path = Field(default_factory=lambda: DEFAULT_DATA_DIR)
    db_file_name: str = DEFAULT_DB_FILE
    log_level: str = "WARNING"

    model_config = {"frozen": True}

    @field_validator("data_dir")
    @classmethod
    def _expand_data_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("db_file_name")
    @classmethod
    def _check_db_file_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("database file name cannot be empty")
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def db_path(self) -> Path:
        """Full path of the JSON store file."""
        return self.data_dir / self.db_file_name


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ`` (for tests).

    Returns:
        Settings with defaults for every unset variable.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    if env.get(ENV_DATA_DIR):
        values["data_dir"] = env[ENV_DATA_DIR]
    if env.get(ENV_DB_FILE):
        values["db_file_name"] = env[ENV_DB_FILE]
    if env.get(ENV_LOG_LEVEL):
        values["log_level"] = env[ENV_LOG_LEVEL]
    return Settings(**values)
