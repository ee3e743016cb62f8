"""
Tick projects API.
"""
from typing import Any, Dict, List, Optional, Union

from tick_api.api.util import parse_response, request, validate_params, with_query
from tick_api.types import (
    CreateProjectParams,
    GetProjectsParams,
    Project,
    ProjectWithDetails,
    UpdateProjectParams,
)


def _page_path(path: str, params: Optional[Union[GetProjectsParams, Dict[str, Any]]]) -> str:
    query = validate_params(GetProjectsParams, params)
    # Tick numbers pages from 1; page 0 is the same as no page
    return with_query(path, {"page": query.page or None})


async def get_projects(
    params: Optional[Union[GetProjectsParams, Dict[str, Any]]] = None,
) -> List[Project]:
    """Open projects, 100 per page."""
    response = await request("GET", _page_path("projects.json", params), "fetch projects")
    return parse_response(List[Project], response)


async def get_closed_projects(
    params: Optional[Union[GetProjectsParams, Dict[str, Any]]] = None,
) -> List[Project]:
    """Closed projects, 100 per page."""
    response = await request(
        "GET", _page_path("projects/closed.json", params), "fetch closed projects"
    )
    return parse_response(List[Project], response)


async def get_project(id: int) -> ProjectWithDetails:
    response = await request("GET", f"projects/{id}.json", f"fetch project with ID {id}")
    return parse_response(ProjectWithDetails, response)


async def create_project(params: Union[CreateProjectParams, Dict[str, Any]]) -> Project:
    """Create a project. Administrators only. Tick expects the body under a "project" key."""
    body = validate_params(CreateProjectParams, params)
    response = await request(
        "POST",
        "projects.json",
        "create project",
        json_body={"project": body.model_dump(exclude_none=True)},
        forbidden="Forbidden: Only administrators can create projects",
    )
    return parse_response(Project, response)


async def update_project(id: int, params: Union[UpdateProjectParams, Dict[str, Any]]) -> Project:
    body = validate_params(UpdateProjectParams, params)
    response = await request(
        "PUT",
        f"projects/{id}.json",
        f"update project with ID {id}",
        json_body={"project": body.model_dump(exclude_none=True)},
        forbidden="Forbidden: Only administrators can update projects",
    )
    return parse_response(Project, response)


async def delete_project(id: int) -> None:
    """Delete a project along with its tasks and entries. Administrators only."""
    await request(
        "DELETE",
        f"projects/{id}.json",
        f"delete project with ID {id}",
        forbidden="Forbidden: Only administrators can delete projects",
    )
