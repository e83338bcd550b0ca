"""Shared utilities for task tracker CLI commands.

This module provides common utilities used across CLI commands:
- Store path resolution and repository construction
- Logging setup
- Formatted output helpers (error, success, info)
- Task tables and detail views rendered with rich
"""

import locale
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError as SettingsError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from task_tracker.application import TaskResponse, TaskStatistics
from task_tracker.domain.shared import TaskTrackerError
from task_tracker.infrastructure import (
    JsonFileStore,
    Settings,
    StoredTaskRepository,
    load_settings,
)

logger = logging.getLogger(__name__)

# Reusable store option for CLI commands
# Usage: def my_command(db: DbOption = None) -> None:
DbOption = Annotated[
    Optional[str],
    typer.Option(
        "--db",
        help="Path to the JSON task store (or set TASK_TRACKER_DB env var)",
        envvar="TASK_TRACKER_DB",
    ),
]

PRIORITY_STYLES = {"high": "bold red", "medium": "yellow", "low": "green"}
STATUS_STYLES = {"done": "green", "in-progress": "cyan", "todo": "white"}


def get_settings() -> Settings:
    """Load settings, exiting with an error line when one is invalid."""
    try:
        return load_settings()
    except SettingsError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        print_error(f"Invalid configuration: {problems}")
        raise typer.Exit(1) from e


def configure_locale() -> None:
    """Use the user's collation locale for text sorting."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("User locale unavailable, keeping the C collation order")
        locale.setlocale(locale.LC_COLLATE, "C")


def configure_logging(debug: bool = False) -> None:
    """Route log records through rich on stderr.

    Args:
        debug: Force DEBUG level instead of the configured one.
    """
    level = "DEBUG" if debug else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def resolve_db_path(explicit_db: str | None = None) -> Path:
    """Get the store path.

    Resolution order:
    1. Explicit --db option (or TASK_TRACKER_DB env var, via Typer)
    2. TASK_TRACKER_DATA_DIR / TASK_TRACKER_DB_FILE settings
    3. ~/.task-tracker/tasks.json
    """
    if explicit_db:
        return Path(explicit_db).expanduser().resolve()
    return get_settings().db_path


def get_repository(db: str | None = None) -> StoredTaskRepository:
    """Open the JSON-file task repository for ``db``."""
    path = resolve_db_path(db)
    logger.debug(f"Using task store {path}")
    return StoredTaskRepository(JsonFileStore(path))


@contextmanager
def handle_errors() -> Iterator[None]:
    """Report task tracker errors and exit with status 1."""
    try:
        yield
    except TaskTrackerError as e:
        logger.debug(f"Command failed: {e.to_dict()}", exc_info=True)
        print_error(str(e))
        raise typer.Exit(1) from e


def split_tags(tags: str | None) -> list[str] | None:
    """Split comma-separated tags; None when the option was not given."""
    if tags is None:
        return None
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def print_error(msg: str) -> None:
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_task_table(tasks: Sequence[TaskResponse], title: str | None = None) -> None:
    """Print tasks as a table, or a notice when there are none."""
    if not tasks:
        print_info("No tasks found.")
        return

    table = Table(title=title, show_lines=False)
    table.add_column("ID", no_wrap=True)
    table.add_column("Description")
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("Due")
    table.add_column("Tags")

    for task in tasks:
        due = task.due_date or ""
        if task.is_overdue:
            due = f"[bold red]{due} (overdue)[/]"
        table.add_row(
            task.id,
            Text(task.description),
            f"[{STATUS_STYLES.get(task.status, 'white')}]{task.status}[/]",
            f"[{PRIORITY_STYLES.get(task.priority, 'white')}]{task.priority}[/]",
            due,
            Text(", ".join(task.tags)),
        )

    Console().print(table)


def print_task_detail(task: TaskResponse) -> None:
    """Print every field of one task."""
    rows = [
        ("ID", task.id),
        ("Description", task.description),
        ("Status", task.status),
        ("Priority", task.priority),
        ("Due", task.due_date or "-"),
        ("Tags", ", ".join(task.tags) or "-"),
        ("Created", task.created_at),
        ("Updated", task.updated_at),
        ("Overdue", "yes" if task.is_overdue else "no"),
    ]
    for label, value in rows:
        typer.echo(f"{label + ':':<13}{value}")


def print_statistics(stats: TaskStatistics) -> None:
    """Print the statistics summary."""
    typer.echo(f"Total tasks:     {stats.total_tasks}")
    typer.echo(
        f"By status:       todo {stats.by_status.todo}, "
        f"in-progress {stats.by_status.in_progress}, done {stats.by_status.done}"
    )
    typer.echo(
        f"By priority:     high {stats.by_priority.high}, "
        f"medium {stats.by_priority.medium}, low {stats.by_priority.low}"
    )
    typer.echo(f"Completed:       {stats.completed_tasks} ({stats.completion_percentage}%)")
    typer.echo(f"Overdue:         {stats.overdue_tasks}")
    typer.echo(
        f"Due dates:       {stats.tasks_with_due_date} set, "
        f"{stats.tasks_without_due_date} unset"
    )
    if stats.all_tags:
        tags = ", ".join(f"{tag} ({stats.tag_counts[tag]})" for tag in stats.all_tags)
        typer.echo(f"Tags:            {tags}")
        typer.echo(f"Avg tags/task:   {stats.average_tags_per_task}")


__all__ = [
    "DbOption",
    "get_settings",
    "configure_locale",
    "configure_logging",
    "resolve_db_path",
    "get_repository",
    "handle_errors",
    "split_tags",
    "print_error",
    "print_success",
    "print_info",
    "print_task_table",
    "print_task_detail",
    "print_statistics",
]
