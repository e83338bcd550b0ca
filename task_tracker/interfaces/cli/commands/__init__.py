"""CLI command groups for the task tracker.

Each module provides a Typer app that gets registered with the main app
using app.add_typer().

Command groups:
- task: Task lifecycle (add, list, search, show, update, start, done, delete, next)
- report: Statistics and export
"""

from task_tracker.interfaces.cli.commands import report, task

__all__ = ["task", "report"]
