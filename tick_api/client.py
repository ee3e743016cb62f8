"""
Async Tick API client bound to one subscription's credentials.
"""
from __future__ import annotations
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, TypeVar, Union

from tick_api.api import clients as clients_api
from tick_api.api import entries as entries_api
from tick_api.api import projects as projects_api
from tick_api.api import tasks as tasks_api
from tick_api.api import users as users_api
from tick_api.api.util import use_configuration
from tick_api.config import Settings, TickConfig
from tick_api.errors import ConfigurationError
from tick_api.types import (
    Client,
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
    ProjectWithDetails,
    Task,
    TaskWithDetails,
    UpdateClientParams,
    UpdateEntryParams,
    UpdateProjectParams,
    UpdateTaskParams,
    User,
)

T = TypeVar("T")

CONFIG_FIELDS = ("subscription_id", "api_token", "user_agent")

# Key spellings used by Tick's JavaScript client
CONFIG_ALIASES = {
    "subscription_id": "subscriptionId",
    "api_token": "apiToken",
    "user_agent": "userAgent",
}


def _config_value(config: Any, field: str) -> Any:
    if isinstance(config, Mapping):
        if field in config:
            return config[field]
        return config.get(CONFIG_ALIASES[field])
    return getattr(config, field, None)


class TickClient:
    """
    Tick API client.

    config is a TickConfig or a mapping with subscription_id, api_token and
    user_agent. The camelCase keys subscriptionId, apiToken and userAgent are
    accepted as well.

    Each method runs the matching resource function with this client's
    configuration active, then restores whatever configuration was active
    before, including when the call fails.
    """

    def __init__(self, config: Union[TickConfig, Mapping[str, Any]]):
        self.config = self.validate_config(config)

    @staticmethod
    def validate_config(config: Union[TickConfig, Mapping[str, Any]]) -> TickConfig:
        """
        Check that every credential is a non-empty string.
        All problems are reported together in one ConfigurationError.
        """
        errors: List[str] = []
        fields: List[str] = []
        for field in CONFIG_FIELDS:
            value = _config_value(config, field)
            if not isinstance(value, str) or not value.strip():
                fields.append(field)
                errors.append(f"{field} is required and must be a non-empty string")

        if errors:
            raise ConfigurationError(
                f"Invalid TickClient configuration: {', '.join(errors)}",
                fields=fields,
            )

        return TickConfig(**{field: _config_value(config, field) for field in CONFIG_FIELDS})

    @classmethod
    def from_env(cls, env: Optional[Settings] = None) -> "TickClient":
        """Build a client from TICK_SUBSCRIPTION_ID, TICK_API_TOKEN and TICK_USER_AGENT."""
        env = env or Settings()
        return cls(
            {
                "subscription_id": env.TICK_SUBSCRIPTION_ID,
                "api_token": env.TICK_API_TOKEN,
                "user_agent": env.TICK_USER_AGENT,
            }
        )

    def __repr__(self) -> str:
        return f"TickClient(subscription_id={self.config.subscription_id!r})"

    async def _with_config(self, fn: Callable[..., Awaitable[T]], *args: Any) -> T:
        with use_configuration(self.config):
            return await fn(*args)

    # Users

    async def get_users(self) -> List[User]:
        return await self._with_config(users_api.get_users)

    async def get_deleted_users(self) -> List[User]:
        return await self._with_config(users_api.get_deleted_users)

    async def create_user(self, params: Union[CreateUserParams, Dict[str, Any]]) -> User:
        return await self._with_config(users_api.create_user, params)

    # Clients

    async def get_clients(self) -> List[Client]:
        return await self._with_config(clients_api.get_clients)

    async def get_all_clients(self) -> List[Client]:
        return await self._with_config(clients_api.get_all_clients)

    async def get_client(self, id: int) -> ClientWithProjects:
        return await self._with_config(clients_api.get_client, id)

    async def create_client(self, params: Union[CreateClientParams, Dict[str, Any]]) -> Client:
        return await self._with_config(clients_api.create_client, params)

    async def update_client(
        self, id: int, params: Union[UpdateClientParams, Dict[str, Any]]
    ) -> Client:
        return await self._with_config(clients_api.update_client, id, params)

    async def delete_client(self, id: int) -> None:
        await self._with_config(clients_api.delete_client, id)

    # Projects

    async def get_projects(
        self, params: Optional[Union[GetProjectsParams, Dict[str, Any]]] = None
    ) -> List[Project]:
        return await self._with_config(projects_api.get_projects, params)

    async def get_closed_projects(
        self, params: Optional[Union[GetProjectsParams, Dict[str, Any]]] = None
    ) -> List[Project]:
        return await self._with_config(projects_api.get_closed_projects, params)

    async def get_project(self, id: int) -> ProjectWithDetails:
        return await self._with_config(projects_api.get_project, id)

    async def create_project(
        self, params: Union[CreateProjectParams, Dict[str, Any]]
    ) -> Project:
        return await self._with_config(projects_api.create_project, params)

    async def update_project(
        self, id: int, params: Union[UpdateProjectParams, Dict[str, Any]]
    ) -> Project:
        return await self._with_config(projects_api.update_project, id, params)

    async def delete_project(self, id: int) -> None:
        await self._with_config(projects_api.delete_project, id)

    # Tasks

    async def get_tasks(self) -> List[Task]:
        return await self._with_config(tasks_api.get_tasks)

    async def get_closed_tasks(self) -> List[Task]:
        return await self._with_config(tasks_api.get_closed_tasks)

    async def get_project_tasks(self, project_id: int) -> List[Task]:
        return await self._with_config(tasks_api.get_project_tasks, project_id)

    async def get_project_closed_tasks(self, project_id: int) -> List[Task]:
        return await self._with_config(tasks_api.get_project_closed_tasks, project_id)

    async def get_task(self, id: str) -> TaskWithDetails:
        return await self._with_config(tasks_api.get_task, id)

    async def create_task(self, params: Union[CreateTaskParams, Dict[str, Any]]) -> Task:
        return await self._with_config(tasks_api.create_task, params)

    async def update_task(
        self, id: str, params: Union[UpdateTaskParams, Dict[str, Any]]
    ) -> Task:
        return await self._with_config(tasks_api.update_task, id, params)

    async def delete_task(self, id: str) -> None:
        await self._with_config(tasks_api.delete_task, id)

    # Entries

    async def get_entries(self, params: Union[GetEntriesParams, Dict[str, Any]]) -> List[Entry]:
        return await self._with_config(entries_api.get_entries, params)

    async def get_user_entries(
        self, user_id: int, params: Union[GetEntriesParams, Dict[str, Any]]
    ) -> List[Entry]:
        return await self._with_config(entries_api.get_user_entries, user_id, params)

    async def get_project_entries(
        self, project_id: int, params: Union[GetEntriesParams, Dict[str, Any]]
    ) -> List[Entry]:
        return await self._with_config(entries_api.get_project_entries, project_id, params)

    async def get_task_entries(
        self, task_id: int, params: Union[GetEntriesParams, Dict[str, Any]]
    ) -> List[Entry]:
        return await self._with_config(entries_api.get_task_entries, task_id, params)

    async def get_entry(self, id: str) -> EntryWithTask:
        return await self._with_config(entries_api.get_entry, id)

    async def create_entry(self, params: Union[CreateEntryParams, Dict[str, Any]]) -> Entry:
        return await self._with_config(entries_api.create_entry, params)

    async def update_entry(
        self, id: str, params: Union[UpdateEntryParams, Dict[str, Any]]
    ) -> Entry:
        return await self._with_config(entries_api.update_entry, id, params)

    async def delete_entry(self, id: str) -> None:
        await self._with_config(entries_api.delete_entry, id)
