"""
Tick time entries API.

Every listing needs a date window (start_date and end_date) or an
updated_at cut-off; the check runs before any request is sent.
"""
from typing import Any, Dict, List, Union

from tick_api.api.util import parse_response, request, validate_params, with_query
from tick_api.errors import ValidationError
from tick_api.types import (
    CreateEntryParams,
    Entry,
    EntryWithTask,
    GetEntriesParams,
    UpdateEntryParams,
)

MISSING_ENTRIES_WINDOW = "Either start_date and end_date OR updated_at must be provided"


def _entries_path(path: str, params: Union[GetEntriesParams, Dict[str, Any]]) -> str:
    filters = validate_params(GetEntriesParams, params)
    if not ((filters.start_date and filters.end_date) or filters.updated_at):
        raise ValidationError(MISSING_ENTRIES_WINDOW)
    return with_query(path, filters.model_dump())


async def get_entries(params: Union[GetEntriesParams, Dict[str, Any]]) -> List[Entry]:
    path = _entries_path("entries.json", params)
    response = await request("GET", path, "fetch entries")
    return parse_response(List[Entry], response)


async def get_user_entries(
    user_id: int, params: Union[GetEntriesParams, Dict[str, Any]]
) -> List[Entry]:
    path = _entries_path(f"users/{user_id}/entries.json", params)
    response = await request("GET", path, f"fetch entries for user {user_id}")
    return parse_response(List[Entry], response)


async def get_project_entries(
    project_id: int, params: Union[GetEntriesParams, Dict[str, Any]]
) -> List[Entry]:
    path = _entries_path(f"projects/{project_id}/entries.json", params)
    response = await request("GET", path, f"fetch entries for project {project_id}")
    return parse_response(List[Entry], response)


async def get_task_entries(
    task_id: int, params: Union[GetEntriesParams, Dict[str, Any]]
) -> List[Entry]:
    # Numeric on purpose: the entries endpoints take the task id as an integer
    path = _entries_path(f"tasks/{task_id}/entries.json", params)
    response = await request("GET", path, f"fetch entries for task {task_id}")
    return parse_response(List[Entry], response)


async def get_entry(id: str) -> EntryWithTask:
    response = await request("GET", f"entries/{id}.json", f"fetch entry with ID {id}")
    return parse_response(EntryWithTask, response)


async def create_entry(params: Union[CreateEntryParams, Dict[str, Any]]) -> Entry:
    body = validate_params(CreateEntryParams, params)
    response = await request(
        "POST",
        "entries.json",
        "create entry",
        json_body=body.model_dump(exclude_none=True),
    )
    return parse_response(Entry, response)


async def update_entry(id: str, params: Union[UpdateEntryParams, Dict[str, Any]]) -> Entry:
    body = validate_params(UpdateEntryParams, params)
    response = await request(
        "PUT",
        f"entries/{id}.json",
        f"update entry with ID {id}",
        json_body=body.model_dump(exclude_none=True),
    )
    return parse_response(Entry, response)


async def delete_entry(id: str) -> None:
    await request("DELETE", f"entries/{id}.json", f"delete entry with ID {id}")
