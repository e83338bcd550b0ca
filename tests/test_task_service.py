from datetime import date

import pytest

from task_tracker.application import (
    CreateTaskRequest,
    UpdateTaskRequest,
    change_status,
    create_task,
    delete_task,
    get_statistics,
    get_task,
    list_tasks,
    next_tasks,
    search_tasks,
    update_task,
)
from task_tracker.domain.shared import NotFoundError, ValidationError
from task_tracker.domain.task import SearchCriteria


def test_create_task_returns_response(memory_repo) -> None:
    response = create_task(
        memory_repo,
        CreateTaskRequest(description="Write report", priority="high", tags=["work", "work"]),
    )

    assert response.status == "todo"
    assert response.priority == "high"
    assert response.tags == ["work"]
    assert response.due_date is None
    assert not response.is_done
    assert get_task(memory_repo, response.id) == response


def test_create_task_rejects_invalid_input(memory_repo) -> None:
    with pytest.raises(ValidationError):
        create_task(memory_repo, CreateTaskRequest(description="   "))
    assert memory_repo.find_all() == []


def test_response_uses_camel_case_aliases(memory_repo) -> None:
    response = create_task(
        memory_repo,
        CreateTaskRequest(description="Pay rent", due_date=date(2025, 4, 1)),
    )

    dumped = response.model_dump(by_alias=True)
    assert dumped["dueDate"] == "2025-04-01"
    assert set(dumped) >= {"createdAt", "updatedAt", "isOverdue", "isDone"}


def test_update_task_applies_only_supplied_fields(memory_repo) -> None:
    created = create_task(
        memory_repo,
        CreateTaskRequest(description="Write report", due_date="2025-04-01", tags=["work"]),
    )

    updated = update_task(memory_repo, UpdateTaskRequest(id=created.id, priority="low"))

    assert updated.priority == "low"
    assert updated.description == "Write report"
    assert updated.due_date == "2025-04-01"
    assert updated.tags == ["work"]
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at
    assert get_task(memory_repo, created.id) == updated


def test_update_task_can_replace_tags_and_clear_due_date(memory_repo) -> None:
    created = create_task(
        memory_repo,
        CreateTaskRequest(description="Write report", due_date="2025-04-01", tags=["work"]),
    )

    updated = update_task(
        memory_repo,
        UpdateTaskRequest(id=created.id, tags=[], clear_due_date=True, status="in-progress"),
    )

    assert updated.tags == []
    assert updated.due_date is None
    assert updated.status == "in-progress"


def test_update_with_invalid_value_leaves_stored_task(memory_repo) -> None:
    created = create_task(memory_repo, CreateTaskRequest(description="Write report"))

    with pytest.raises(ValidationError):
        update_task(
            memory_repo,
            UpdateTaskRequest(id=created.id, description="New text", status="blocked"),
        )
    assert get_task(memory_repo, created.id).description == "Write report"


def test_update_missing_task(memory_repo) -> None:
    with pytest.raises(NotFoundError):
        update_task(memory_repo, UpdateTaskRequest(id="missing", priority="low"))


def test_has_changes() -> None:
    assert not UpdateTaskRequest(id="t1").has_changes()
    assert UpdateTaskRequest(id="t1", tags=[]).has_changes()
    assert UpdateTaskRequest(id="t1", clear_due_date=True).has_changes()


def test_done_task_can_be_reopened(memory_repo) -> None:
    created = create_task(memory_repo, CreateTaskRequest(description="Write report"))

    assert change_status(memory_repo, created.id, "done").is_done
    reopened = change_status(memory_repo, created.id, "todo")
    assert reopened.status == "todo"
    assert not reopened.is_done


def test_delete_task(memory_repo) -> None:
    created = create_task(memory_repo, CreateTaskRequest(description="Write report"))
    delete_task(memory_repo, created.id)

    with pytest.raises(NotFoundError):
        get_task(memory_repo, created.id)


def test_list_tasks_filters_and_sorts(memory_repo) -> None:
    for description, priority in [("b", "low"), ("a", "high"), ("c", "medium")]:
        create_task(memory_repo, CreateTaskRequest(description=description, priority=priority))
    change_status(memory_repo, list_tasks(memory_repo)[0].id, "done")

    assert [r.description for r in list_tasks(memory_repo)] == ["b", "a", "c"]
    assert [r.description for r in list_tasks(memory_repo, sort_by="description")] == [
        "a",
        "b",
        "c",
    ]
    assert [
        r.description for r in list_tasks(memory_repo, sort_by="priority", sort_order="desc")
    ] == ["a", "c", "b"]
    assert [r.description for r in list_tasks(memory_repo, status="DONE")] == ["b"]
    assert [r.description for r in list_tasks(memory_repo, priority="medium")] == ["c"]


def test_list_tasks_rejects_unknown_filter(memory_repo) -> None:
    with pytest.raises(ValidationError):
        list_tasks(memory_repo, status="blocked")
    with pytest.raises(ValidationError):
        list_tasks(memory_repo, priority="urgent")


def test_search_tasks_flags_overdue_against_reference(memory_repo) -> None:
    create_task(memory_repo, CreateTaskRequest(description="Late", due_date="2025-03-01"))
    create_task(memory_repo, CreateTaskRequest(description="Later", due_date="2025-04-01"))

    results = search_tasks(
        memory_repo,
        SearchCriteria(is_overdue=True),
        reference=date(2025, 3, 10),
    )

    assert [r.description for r in results] == ["Late"]
    assert results[0].is_overdue


def test_next_tasks_skips_done_and_ranks_by_urgency(memory_repo) -> None:
    requests = [
        CreateTaskRequest(description="low", priority="low"),
        CreateTaskRequest(description="high-late", priority="high", due_date="2025-03-01"),
        CreateTaskRequest(description="high-soon", priority="high", due_date="2025-01-01"),
        CreateTaskRequest(description="finished", priority="high", due_date="2024-01-01"),
    ]
    created = [create_task(memory_repo, request) for request in requests]
    change_status(memory_repo, created[-1].id, "done")

    ranked = next_tasks(memory_repo)
    assert [r.description for r in ranked] == ["high-soon", "high-late", "low"]
    assert [r.description for r in next_tasks(memory_repo, limit=1)] == ["high-soon"]


def test_statistics_summary(memory_repo) -> None:
    specs = [
        ("a", "high", "2025-03-01", ["work"]),
        ("b", "low", None, ["work", "home"]),
        ("c", "medium", "2025-05-01", []),
    ]
    created = [
        create_task(
            memory_repo,
            CreateTaskRequest(description=d, priority=p, due_date=due, tags=tags),
        )
        for d, p, due, tags in specs
    ]
    change_status(memory_repo, created[0].id, "done")
    change_status(memory_repo, created[1].id, "in-progress")

    stats = get_statistics(memory_repo, reference=date(2025, 3, 10))

    assert stats.total_tasks == 3
    assert (stats.by_status.todo, stats.by_status.in_progress, stats.by_status.done) == (1, 1, 1)
    assert (stats.by_priority.low, stats.by_priority.medium, stats.by_priority.high) == (1, 1, 1)
    assert stats.completed_tasks == 1
    assert stats.overdue_tasks == 1
    assert stats.completion_percentage == 33
    assert stats.all_tags == ["home", "work"]
    assert stats.tag_counts == {"work": 2, "home": 1}
    assert stats.average_tags_per_task == 1.0
    assert stats.tasks_with_due_date == 2
    assert stats.tasks_without_due_date == 1


def test_statistics_rounds_half_up(memory_repo) -> None:
    first = create_task(memory_repo, CreateTaskRequest(description="a", tags=["x"]))
    create_task(memory_repo, CreateTaskRequest(description="b"))
    create_task(memory_repo, CreateTaskRequest(description="c"))
    create_task(memory_repo, CreateTaskRequest(description="d"))
    change_status(memory_repo, first.id, "done")

    stats = get_statistics(memory_repo)

    assert stats.completion_percentage == 25
    assert stats.average_tags_per_task == 0.3


def test_statistics_of_empty_repository(memory_repo) -> None:
    stats = get_statistics(memory_repo)

    assert stats.total_tasks == 0
    assert stats.completion_percentage == 0
    assert stats.average_tags_per_task == 0.0
    assert stats.all_tags == []
