"""Render task responses as JSON or CSV text.

CSV fields are quoted only when they contain a comma, a double quote or a
line break; inner double quotes are doubled. Tags are joined with ``;`` so
they never collide with the field delimiter.
"""

import json
from collections.abc import Sequence

from .schemas import TaskResponse

CSV_HEADERS = [
    "ID",
    "Description",
    "Status",
    "Priority",
    "Due Date",
    "Tags",
    "Created At",
    "Updated At",
    "Is Overdue",
    "Is Done",
]


def render_json(responses: Sequence[TaskResponse], pretty: bool = True) -> str:
    data = [response.model_dump(by_alias=True) for response in responses]
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


def _csv_row(response: TaskResponse) -> list[str]:
    return [
        response.id,
        response.description,
        response.status,
        response.priority,
        response.due_date or "",
        ";".join(response.tags),
        response.created_at,
        response.updated_at,
        "true" if response.is_overdue else "false",
        "true" if response.is_done else "false",
    ]


def _escape(field: str) -> str:
    if "," in field or '"' in field or "\n" in field:
        return '"' + field.replace('"', '""') + '"'
    return field


def _csv_line(fields: list[str]) -> str:
    return ",".join(_escape(field) for field in fields)


def render_csv(responses: Sequence[TaskResponse], include_headers: bool = True) -> str:
    """Render rows separated by ``\\n`` with no trailing line break."""
    lines = [_csv_line(CSV_HEADERS)] if include_headers else []
    lines.extend(_csv_line(_csv_row(response)) for response in responses)
    return "\n".join(lines)
