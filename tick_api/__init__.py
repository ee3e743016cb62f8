"""
Typed async client for the Tick v2 time tracking API.
"""
from tick_api.client import TickClient
from tick_api.config import TickConfig
from tick_api.errors import (
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    RequestError,
    ResponseValidationError,
    TickAPIError,
    ValidationError,
)
from tick_api.types import (
    Client,
    ClientProjectsSummary,
    ClientWithProjects,
    CreateClientParams,
    CreateEntryParams,
    CreateProjectParams,
    CreateTaskParams,
    CreateUserParams,
    Entry,
    EntryWithTask,
    GetEntriesParams,
    GetProjectsParams,
    Project,
    ProjectTasksSummary,
    ProjectWithDetails,
    Task,
    TaskEntriesSummary,
    TaskWithDetails,
    UpdateClientParams,
    UpdateEntryParams,
    UpdateProjectParams,
    UpdateTaskParams,
    User,
)

__version__ = "0.2.0"

__all__ = [
    "TickClient",
    "TickConfig",
    "TickAPIError",
    "ConfigurationError",
    "ConflictError",
    "ForbiddenError",
    "RequestError",
    "ResponseValidationError",
    "ValidationError",
    "User",
    "CreateUserParams",
    "Client",
    "ClientProjectsSummary",
    "ClientWithProjects",
    "CreateClientParams",
    "UpdateClientParams",
    "Project",
    "ProjectTasksSummary",
    "ProjectWithDetails",
    "CreateProjectParams",
    "UpdateProjectParams",
    "GetProjectsParams",
    "Task",
    "TaskEntriesSummary",
    "TaskWithDetails",
    "CreateTaskParams",
    "UpdateTaskParams",
    "Entry",
    "EntryWithTask",
    "CreateEntryParams",
    "UpdateEntryParams",
    "GetEntriesParams",
]
