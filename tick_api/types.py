"""
Pydantic models for Tick API types.

Response models ignore keys they do not declare. Parameter models forbid
them, so server-generated fields (id, url, timestamps) are never sent.
Ids keep the remote API's types: tasks and entries use string ids,
everything else uses integers.
"""
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, EmailStr, StrictBool, StrictFloat, StrictInt, StrictStr

Number = Union[StrictInt, StrictFloat]


class Params(BaseModel):
    """Base for request bodies and query filters."""
    model_config = ConfigDict(extra="forbid")


# Users

class User(BaseModel):
    """User model."""
    id: StrictInt
    first_name: StrictStr
    last_name: StrictStr
    email: EmailStr
    timezone: StrictStr
    updated_at: StrictStr


class CreateUserParams(Params):
    """Request body for creating a user."""
    first_name: StrictStr
    last_name: StrictStr
    email: EmailStr
    admin: Optional[StrictBool] = None
    billable_rate: Optional[StrictStr] = None


# Clients

class Client(BaseModel):
    """Client model."""
    id: StrictInt
    name: StrictStr
    archive: StrictBool
    url: StrictStr
    updated_at: StrictStr


class ClientProjectsSummary(BaseModel):
    count: Number
    url: StrictStr
    updated_at: StrictStr


class ClientWithProjects(Client):
    """Client with a summary of its projects."""
    projects: ClientProjectsSummary


class CreateClientParams(Params):
    """Request body for creating a client."""
    name: StrictStr
    archive: Optional[StrictBool] = None


# Tick accepts the same body for updates
UpdateClientParams = CreateClientParams


# Projects

class Project(BaseModel):
    """Project model. A project is open while date_closed is null."""
    id: StrictInt
    name: StrictStr
    budget: Number
    date_closed: Optional[StrictStr]
    notifications: StrictBool
    billable: StrictBool
    recurring: StrictBool
    client_id: StrictInt
    owner_id: StrictInt
    url: StrictStr
    created_at: StrictStr
    updated_at: StrictStr

    @property
    def is_open(self) -> bool:
        return self.date_closed is None


class ProjectTasksSummary(BaseModel):
    count: Number
    url: StrictStr
    updated_at: Optional[StrictStr]


class ProjectWithDetails(Project):
    """Project with hours, task summary and its client."""
    total_hours: Number
    tasks: ProjectTasksSummary
    client: Client


class CreateProjectParams(Params):
    """Request body for creating a project."""
    name: StrictStr
    budget: Number
    notifications: StrictBool
    billable: StrictBool
    recurring: StrictBool
    client_id: StrictInt
    owner_id: StrictInt


class UpdateProjectParams(Params):
    """Request body for updating a project."""
    name: Optional[StrictStr] = None
    budget: Optional[Number] = None
    notifications: Optional[StrictBool] = None
    billable: Optional[StrictBool] = None
    recurring: Optional[StrictBool] = None
    client_id: Optional[StrictInt] = None
    owner_id: Optional[StrictInt] = None


class GetProjectsParams(Params):
    """Pagination for project listings."""
    page: Optional[StrictInt] = None


# Tasks

class Task(BaseModel):
    """Task model. Note the string id."""
    id: StrictStr
    name: StrictStr
    budget: Number
    position: Number
    project_id: StrictInt
    date_closed: Optional[StrictStr]
    billable: StrictBool
    url: StrictStr
    created_at: StrictStr
    updated_at: StrictStr

    @property
    def is_open(self) -> bool:
        return self.date_closed is None


class TaskEntriesSummary(BaseModel):
    count: Number
    url: StrictStr
    updated_at: StrictStr


class TaskWithDetails(Task):
    """Task with hours, entry summary and its project."""
    total_hours: Number
    entries: TaskEntriesSummary
    project: Project


class CreateTaskParams(Params):
    """Request body for creating a task."""
    name: StrictStr
    budget: Number
    project_id: StrictInt
    billable: StrictBool


class UpdateTaskParams(Params):
    """Request body for updating a task."""
    name: Optional[StrictStr] = None
    budget: Optional[Number] = None
    project_id: Optional[StrictInt] = None
    billable: Optional[StrictBool] = None


# Entries

class Entry(BaseModel):
    """Time entry model."""
    id: StrictStr
    date: StrictStr  # YYYY-MM-DD
    hours: Number
    notes: StrictStr
    task_id: StrictInt
    user_id: StrictInt
    url: StrictStr
    created_at: StrictStr
    updated_at: StrictStr


class EntryWithTask(Entry):
    """Time entry with its full task."""
    task: Task


class CreateEntryParams(Params):
    """Request body for creating a time entry."""
    date: StrictStr
    hours: Number
    notes: StrictStr
    task_id: StrictInt
    user_id: Optional[StrictInt] = None  # ignored by Tick unless admin


class UpdateEntryParams(Params):
    """Request body for updating a time entry."""
    date: Optional[StrictStr] = None
    hours: Optional[Number] = None
    notes: Optional[StrictStr] = None
    task_id: Optional[StrictInt] = None
    user_id: Optional[StrictInt] = None
    billed: Optional[StrictBool] = None


class GetEntriesParams(Params):
    """
    Filters for entry listings.
    Tick requires either start_date and end_date, or updated_at.
    """
    start_date: Optional[StrictStr] = None
    end_date: Optional[StrictStr] = None
    updated_at: Optional[StrictStr] = None
    billable: Optional[StrictBool] = None
    project_id: Optional[StrictInt] = None
    task_id: Optional[StrictInt] = None
    user_id: Optional[StrictInt] = None
    billed: Optional[StrictBool] = None
