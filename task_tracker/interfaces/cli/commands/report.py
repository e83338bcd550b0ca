"""Reporting CLI commands: statistics and export."""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from task_tracker.application import export_tasks, get_statistics
from task_tracker.interfaces.cli.common import (
    DbOption,
    get_repository,
    handle_errors,
    print_error,
    print_statistics,
    print_success,
)

app = typer.Typer(help="Statistics and export commands")


class Format(str, Enum):
    JSON = "json"
    CSV = "csv"


@app.command("stats")
def stats(db: DbOption = None) -> None:
    """Show task statistics."""
    with handle_errors():
        summary = get_statistics(get_repository(db))
    print_statistics(summary)


@app.command("export")
def export(
    fmt: Format = typer.Option(Format.JSON, "--format", "-f", help="Output format"),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output file (default: tasks-<timestamp>.<format>)"
    ),
    stdout: bool = typer.Option(False, "--stdout", help="Print instead of writing a file"),
    pretty: bool = typer.Option(True, "--pretty/--compact", help="Indent JSON output"),
    headers: bool = typer.Option(True, "--headers/--no-headers", help="CSV header row"),
    db: DbOption = None,
) -> None:
    """Export all tasks to JSON or CSV."""
    with handle_errors():
        content = export_tasks(
            get_repository(db),
            fmt.value,
            pretty=pretty,
            include_headers=headers,
        )

    if stdout:
        typer.echo(content)
        return

    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    path = Path(output or f"tasks-{timestamp}.{fmt.value}").expanduser()
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write {path}: {e}")
        raise typer.Exit(1) from e
    print_success(f"Exported to: {path}")
