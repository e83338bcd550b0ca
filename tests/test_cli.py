import json

import pytest
from typer.testing import CliRunner

from task_tracker import __version__
from task_tracker.interfaces.cli import app

runner = CliRunner()


@pytest.fixture()
def cli(db_path):
    """Invoke the CLI against a temporary store."""

    def invoke(*args: str, input: str | None = None):
        return runner.invoke(app, [*args, "--db", str(db_path)], input=input)

    return invoke


def _records(db_path) -> list[dict]:
    return json.loads(db_path.read_text(encoding="utf-8"))


def _add(cli, db_path, *args: str) -> str:
    result = cli("add", *args)
    assert result.exit_code == 0, result.output
    return _records(db_path)[-1]["id"]


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_add_stores_task(cli, db_path) -> None:
    result = cli("add", "Write report", "-p", "high", "--due", "2025-03-01", "-t", "work, home")

    assert result.exit_code == 0, result.output
    assert "Created task" in result.output

    (record,) = _records(db_path)
    assert record["description"] == "Write report"
    assert record["priority"] == "high"
    assert record["dueDate"] == "2025-03-01"
    assert record["tags"] == ["work", "home"]
    assert record["status"] == "todo"


def test_add_rejects_blank_description(cli, db_path) -> None:
    result = cli("add", "   ")

    assert result.exit_code == 1
    assert "Invalid task: Task description cannot be empty" in result.output
    assert not db_path.exists()


def test_add_rejects_bad_due_date(cli) -> None:
    result = cli("add", "Write report", "--due", "someday")
    assert result.exit_code == 1
    assert "Invalid date provided" in result.output


def test_show_missing_task(cli) -> None:
    result = cli("task", "show", "missing")
    assert result.exit_code == 1
    assert "Task with ID 'missing' was not found" in result.output


def test_show_prints_details(cli, db_path) -> None:
    task_id = _add(cli, db_path, "Write report", "-t", "work")

    result = cli("task", "show", task_id)

    assert result.exit_code == 0, result.output
    assert task_id in result.output
    assert "Description: Write report" in result.output
    assert "Tags:        work" in result.output


def test_status_commands(cli, db_path) -> None:
    task_id = _add(cli, db_path, "Write report")

    assert cli("task", "start", task_id).exit_code == 0
    assert _records(db_path)[0]["status"] == "in-progress"

    result = cli("done", task_id)
    assert result.exit_code == 0, result.output
    assert "Marked done: Write report" in result.output
    assert _records(db_path)[0]["status"] == "done"

    assert cli("task", "reopen", task_id).exit_code == 0
    assert _records(db_path)[0]["status"] == "todo"


def test_update_fields(cli, db_path) -> None:
    task_id = _add(cli, db_path, "Write report", "--due", "2025-03-01", "-t", "work")

    result = cli(
        "task",
        "update",
        task_id,
        "--description",
        "Write final report",
        "-p",
        "low",
        "--due",
        "",
        "--tags",
        "",
    )

    assert result.exit_code == 0, result.output
    (record,) = _records(db_path)
    assert record["description"] == "Write final report"
    assert record["priority"] == "low"
    assert record["dueDate"] is None
    assert record["tags"] == []


def test_update_without_changes_fails(cli, db_path) -> None:
    task_id = _add(cli, db_path, "Write report")

    result = cli("task", "update", task_id)

    assert result.exit_code == 1
    assert "Nothing to update" in result.output


def test_delete_with_confirmation(cli, db_path) -> None:
    task_id = _add(cli, db_path, "Write report")

    result = cli("task", "delete", task_id, input="n\n")
    assert "Cancelled." in result.output
    assert len(_records(db_path)) == 1

    result = cli("task", "delete", task_id, "--force")
    assert result.exit_code == 0, result.output
    assert _records(db_path) == []


def test_list_rejects_unknown_status(cli) -> None:
    result = cli("list", "--status", "blocked")
    assert result.exit_code == 2


def test_list_and_search_run(cli, db_path) -> None:
    _add(cli, db_path, "Write report", "-t", "work")
    _add(cli, db_path, "Buy milk", "-t", "home")

    assert cli("list", "--sort", "description", "--order", "desc").exit_code == 0

    result = cli("task", "search", "nothing-matches")
    assert result.exit_code == 0
    assert "No tasks found matching the criteria" in result.output


def test_next_and_stats(cli, db_path) -> None:
    _add(cli, db_path, "Write report", "-p", "high", "-t", "work")
    _add(cli, db_path, "Buy milk", "-p", "low")

    assert cli("next", "-n", "1").exit_code == 0

    result = cli("stats")
    assert result.exit_code == 0, result.output
    assert "Total tasks:     2" in result.output
    assert "work (1)" in result.output


def test_export_to_stdout(cli, db_path) -> None:
    _add(cli, db_path, "Write report")

    result = cli("report", "export", "--format", "csv", "--stdout", "--no-headers")

    assert result.exit_code == 0, result.output
    assert result.output.startswith(_records(db_path)[0]["id"] + ",Write report,todo,medium,")


def test_export_to_file(cli, db_path, tmp_path) -> None:
    _add(cli, db_path, "Write report")
    target = tmp_path / "out.json"

    result = cli("report", "export", "-o", str(target))

    assert result.exit_code == 0, result.output
    assert "Exported to:" in result.output
    exported = json.loads(target.read_text(encoding="utf-8"))
    assert exported[0]["description"] == "Write report"
    assert exported[0]["isDone"] is False


def test_db_path_from_environment(db_path) -> None:
    result = runner.invoke(app, ["add", "From env"], env={"TASK_TRACKER_DB": str(db_path)})

    assert result.exit_code == 0, result.output
    assert _records(db_path)[0]["description"] == "From env"


def test_corrupt_store_is_reported(cli, db_path) -> None:
    db_path.write_text("{not json", encoding="utf-8")

    result = cli("list")

    assert result.exit_code == 1
    assert "Failed to find all tasks" in result.output


def test_invalid_log_level_is_reported() -> None:
    result = runner.invoke(app, ["list"], env={"TASK_TRACKER_LOG_LEVEL": "LOUD"})

    assert result.exit_code == 1
    assert "Error: Invalid configuration" in result.output
    assert "unknown log level: LOUD" in result.output
    assert "Traceback" not in result.output


def test_blank_db_file_name_is_reported(tmp_path) -> None:
    result = runner.invoke(
        app,
        ["stats"],
        env={
            "TASK_TRACKER_DB": None,
            "TASK_TRACKER_DATA_DIR": str(tmp_path),
            "TASK_TRACKER_DB_FILE": "   ",
        },
    )

    assert result.exit_code == 1
    assert "database file name cannot be empty" in result.output


def test_list_defaults_to_creation_order(db_path) -> None:
    records = [
        {
            "id": f"id-{name}",
            "description": name,
            "status": "todo",
            "priority": "medium",
            "dueDate": None,
            "tags": [],
            "createdAt": created_at,
            "updatedAt": created_at,
        }
        for name, created_at in [
            ("newer", "2025-03-02T09:00:00+00:00"),
            ("older", "2025-03-01T09:00:00+00:00"),
        ]
    ]
    db_path.write_text(json.dumps(records), encoding="utf-8")

    for command in (["list"], ["task", "list"]):
        result = runner.invoke(app, [*command, "--db", str(db_path)])
        assert result.exit_code == 0, result.output
        assert result.output.index("older") < result.output.index("newer")
