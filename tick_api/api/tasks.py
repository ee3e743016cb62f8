"""
Tick tasks API.

Task ids are strings, while the project ids they belong to are integers.
"""
from typing import Any, Dict, List, Union

from tick_api.api.util import parse_response, request, validate_params
from tick_api.types import CreateTaskParams, Task, TaskWithDetails, UpdateTaskParams


async def get_tasks() -> List[Task]:
    """Open tasks across all projects."""
    response = await request("GET", "tasks.json", "fetch tasks")
    return parse_response(List[Task], response)


async def get_closed_tasks() -> List[Task]:
    response = await request("GET", "tasks/closed.json", "fetch closed tasks")
    return parse_response(List[Task], response)


async def get_project_tasks(project_id: int) -> List[Task]:
    response = await request(
        "GET",
        f"projects/{project_id}/tasks.json",
        f"fetch tasks for project {project_id}",
    )
    return parse_response(List[Task], response)


async def get_project_closed_tasks(project_id: int) -> List[Task]:
    response = await request(
        "GET",
        f"projects/{project_id}/tasks/closed.json",
        f"fetch closed tasks for project {project_id}",
    )
    return parse_response(List[Task], response)


async def get_task(id: str) -> TaskWithDetails:
    response = await request("GET", f"tasks/{id}.json", f"fetch task with ID {id}")
    return parse_response(TaskWithDetails, response)


async def create_task(params: Union[CreateTaskParams, Dict[str, Any]]) -> Task:
    body = validate_params(CreateTaskParams, params)
    response = await request(
        "POST",
        "tasks.json",
        "create task",
        json_body=body.model_dump(exclude_none=True),
        forbidden="Forbidden: Only administrators can create tasks",
    )
    return parse_response(Task, response)


async def update_task(id: str, params: Union[UpdateTaskParams, Dict[str, Any]]) -> Task:
    body = validate_params(UpdateTaskParams, params)
    response = await request(
        "PUT",
        f"tasks/{id}.json",
        f"update task with ID {id}",
        json_body=body.model_dump(exclude_none=True),
        forbidden="Forbidden: Only administrators can update tasks",
    )
    return parse_response(Task, response)


async def delete_task(id: str) -> None:
    """Delete a task. Only tasks without entries can be deleted."""
    await request(
        "DELETE",
        f"tasks/{id}.json",
        f"delete task with ID {id}",
        forbidden="Forbidden: Only administrators can delete tasks",
        conflict=f"Task {id} cannot be deleted because it still has associated entries",
    )
