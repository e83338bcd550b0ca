"""CLI interface for the task tracker using Typer.

Usage:
    task-tracker add "Write report" -p high --due 2025-03-01
    task-tracker list --sort dueDate
    task-tracker done <task-id>
    task-tracker stats

The CLI is structured as:
- app: Main Typer application
- commands/: Command groups (task, report)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from task_tracker import __version__
from task_tracker.interfaces.cli.commands import report, task
from task_tracker.interfaces.cli.common import DbOption, configure_locale, configure_logging

# Create the main Typer application
app = typer.Typer(
    name="task-tracker",
    help="Track tasks with priorities, due dates and tags",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"task-tracker version {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Task tracker - manage tasks from the command line."""
    configure_locale()
    configure_logging(debug)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(task.app, name="task")
app.add_typer(report.app, name="report")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("add")
def add(
    description: str = typer.Argument(..., help="What needs to be done"),
    priority: task.PriorityValue = typer.Option(
        task.PriorityValue.MEDIUM, "--priority", "-p", help="Task priority"
    ),
    due: Optional[str] = typer.Option(None, "--due", "-d", help="Due date (YYYY-MM-DD)"),
    tags: Optional[str] = typer.Option(None, "--tags", "-t", help="Comma-separated tags"),
    db: DbOption = None,
) -> None:
    """Create a task (shortcut for 'task add')."""
    task.add(description=description, priority=priority, due=due, tags=tags, db=db)


@app.command("list")
def list_cmd(
    status: Optional[task.StatusValue] = typer.Option(
        None, "--status", "-s", help="Only tasks with this status"
    ),
    sort: task.SortKey = typer.Option(task.SortKey.CREATED_AT, "--sort", help="Sort field"),
    order: task.Order = typer.Option(task.Order.ASC, "--order", help="Sort order"),
    db: DbOption = None,
) -> None:
    """List tasks (shortcut for 'task list')."""
    task.list_cmd(status=status, priority=None, sort=sort, order=order, db=db)


@app.command("done")
def done(
    task_id: str = typer.Argument(..., help="Task ID"),
    db: DbOption = None,
) -> None:
    """Mark a task done (shortcut for 'task done')."""
    task.done(task_id=task_id, db=db)


@app.command("next")
def next_cmd(
    limit: int = typer.Option(5, "--limit", "-n", min=1, help="How many tasks to show"),
    db: DbOption = None,
) -> None:
    """Show most urgent tasks (shortcut for 'task next')."""
    task.next_cmd(limit=limit, db=db)


@app.command("stats")
def stats(db: DbOption = None) -> None:
    """Show statistics (shortcut for 'report stats')."""
    report.stats(db=db)


__all__ = ["app"]
