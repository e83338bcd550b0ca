"""Task management CLI commands.

Commands for the task lifecycle: adding, listing, searching, updating,
changing status and deleting tasks.
"""

from enum import Enum
from typing import Optional

import typer

from task_tracker.application import (
    CreateTaskRequest,
    UpdateTaskRequest,
    change_status,
    create_task,
    delete_task,
    get_task,
    list_tasks,
    next_tasks,
    search_tasks,
    update_task,
)
from task_tracker.domain.task import (
    PriorityValue,
    SearchCriteria,
    StatusValue,
)
from task_tracker.interfaces.cli.common import (
    DbOption,
    get_repository,
    handle_errors,
    print_info,
    print_success,
    print_task_detail,
    print_task_table,
    split_tags,
)

app = typer.Typer(help="Task management commands")


class SortKey(str, Enum):
    PRIORITY = "priority"
    DUE_DATE = "dueDate"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    DESCRIPTION = "description"


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


@app.command("add")
def add(
    description: str = typer.Argument(..., help="What needs to be done"),
    priority: PriorityValue = typer.Option(
        PriorityValue.MEDIUM, "--priority", "-p", help="Task priority"
    ),
    due: Optional[str] = typer.Option(None, "--due", "-d", help="Due date (YYYY-MM-DD)"),
    tags: Optional[str] = typer.Option(None, "--tags", "-t", help="Comma-separated tags"),
    db: DbOption = None,
) -> None:
    """Create a new task."""
    with handle_errors():
        task = create_task(
            get_repository(db),
            CreateTaskRequest(
                description=description,
                priority=priority.value,
                due_date=due,
                tags=split_tags(tags) or [],
            ),
        )
    print_success(f"Created task {task.id}")
    print_task_detail(task)


@app.command("list")
def list_cmd(
    status: Optional[StatusValue] = typer.Option(
        None, "--status", "-s", help="Only tasks with this status"
    ),
    priority: Optional[PriorityValue] = typer.Option(
        None, "--priority", "-p", help="Only tasks with this priority"
    ),
    sort: SortKey = typer.Option(SortKey.CREATED_AT, "--sort", help="Sort field"),
    order: Order = typer.Option(Order.ASC, "--order", help="Sort order"),
    db: DbOption = None,
) -> None:
    """List tasks."""
    with handle_errors():
        tasks = list_tasks(
            get_repository(db),
            status=status.value if status else None,
            priority=priority.value if priority else None,
            sort_by=sort.value,
            sort_order=order.value,
        )
    print_task_table(tasks, title=f"Tasks ({len(tasks)})")


@app.command("search")
def search(
    query: Optional[str] = typer.Argument(None, help="Keyword to search for"),
    status: Optional[StatusValue] = typer.Option(None, "--status", "-s", help="Filter by status"),
    priority: Optional[PriorityValue] = typer.Option(
        None, "--priority", "-p", help="Filter by priority"
    ),
    tags: Optional[str] = typer.Option(
        None, "--tags", "-t", help="Comma-separated tags (matches any)"
    ),
    overdue: Optional[bool] = typer.Option(
        None, "--overdue/--not-overdue", help="Filter by overdue flag"
    ),
    done: Optional[bool] = typer.Option(None, "--done/--not-done", help="Filter by done flag"),
    sort: SortKey = typer.Option(SortKey.CREATED_AT, "--sort", help="Sort field"),
    order: Order = typer.Option(Order.ASC, "--order", help="Sort order"),
    db: DbOption = None,
) -> None:
    """Search tasks with filters."""
    criteria = SearchCriteria(
        keyword=query,
        status=status,
        priority=priority,
        tags=split_tags(tags) or [],
        is_overdue=overdue,
        is_done=done,
        sort_by=sort.value,
        sort_order=order.value,
    )
    with handle_errors():
        results = search_tasks(get_repository(db), criteria)

    if not results:
        print_info("No tasks found matching the criteria")
        return
    print_task_table(results, title=f"Search Results ({len(results)})")


@app.command("show")
def show(
    task_id: str = typer.Argument(..., help="Task ID"),
    db: DbOption = None,
) -> None:
    """Show every field of a task."""
    with handle_errors():
        task = get_task(get_repository(db), task_id)
    print_task_detail(task)


@app.command("update")
def update(
    task_id: str = typer.Argument(..., help="Task ID"),
    description: Optional[str] = typer.Option(None, "--description", help="New description"),
    status: Optional[StatusValue] = typer.Option(None, "--status", "-s", help="New status"),
    priority: Optional[PriorityValue] = typer.Option(
        None, "--priority", "-p", help="New priority"
    ),
    due: Optional[str] = typer.Option(
        None, "--due", "-d", help="New due date (YYYY-MM-DD, empty string clears it)"
    ),
    tags: Optional[str] = typer.Option(
        None, "--tags", "-t", help="Replace tags (comma-separated, empty string clears them)"
    ),
    db: DbOption = None,
) -> None:
    """Update fields of an existing task."""
    request = UpdateTaskRequest(
        id=task_id,
        description=description,
        status=status.value if status else None,
        priority=priority.value if priority else None,
        due_date=due or None,
        clear_due_date=due == "",
        tags=split_tags(tags),
    )
    if not request.has_changes():
        print_info("Nothing to update. Pass at least one option.")
        raise typer.Exit(1)

    with handle_errors():
        task = update_task(get_repository(db), request)
    print_success(f"Updated task {task.id}")
    print_task_detail(task)


@app.command("start")
def start(
    task_id: str = typer.Argument(..., help="Task ID"),
    db: DbOption = None,
) -> None:
    """Mark a task as in progress."""
    with handle_errors():
        task = change_status(get_repository(db), task_id, StatusValue.IN_PROGRESS.value)
    print_success(f"Started: {task.description}")


@app.command("done")
def done(
    task_id: str = typer.Argument(..., help="Task ID"),
    db: DbOption = None,
) -> None:
    """Mark a task as done."""
    with handle_errors():
        task = change_status(get_repository(db), task_id, StatusValue.DONE.value)
    print_success(f"Marked done: {task.description}")


@app.command("reopen")
def reopen(
    task_id: str = typer.Argument(..., help="Task ID"),
    db: DbOption = None,
) -> None:
    """Move a task back to todo."""
    with handle_errors():
        task = change_status(get_repository(db), task_id, StatusValue.TODO.value)
    print_success(f"Reopened: {task.description}")


@app.command("delete")
def delete(
    task_id: str = typer.Argument(..., help="Task ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
    db: DbOption = None,
) -> None:
    """Delete a task."""
    repo = get_repository(db)
    with handle_errors():
        task = get_task(repo, task_id)
        if not force and not typer.confirm(f"Delete '{task.description}'?"):
            print_info("Cancelled.")
            return
        delete_task(repo, task_id)
    print_success(f"Deleted task {task_id}")


@app.command("next")
def next_cmd(
    limit: int = typer.Option(5, "--limit", "-n", min=1, help="How many tasks to show"),
    db: DbOption = None,
) -> None:
    """Show the most urgent open tasks."""
    with handle_errors():
        tasks = next_tasks(get_repository(db), limit=limit)
    print_task_table(tasks, title="Next up")
