"""
Tick clients API.

Create, update and delete are restricted to administrators, and only
clients without projects can be deleted.
"""
from typing import Any, Dict, List, Union

from tick_api.api.util import parse_response, request, validate_params
from tick_api.types import Client, ClientWithProjects, CreateClientParams, UpdateClientParams


async def get_clients() -> List[Client]:
    """Clients that have open projects."""
    response = await request("GET", "clients.json", "fetch clients")
    return parse_response(List[Client], response)


async def get_all_clients() -> List[Client]:
    """All clients, archived ones included."""
    response = await request("GET", "clients/all.json", "fetch all clients")
    return parse_response(List[Client], response)


async def get_client(id: int) -> ClientWithProjects:
    response = await request("GET", f"clients/{id}.json", f"fetch client with ID {id}")
    return parse_response(ClientWithProjects, response)


async def create_client(params: Union[CreateClientParams, Dict[str, Any]]) -> Client:
    body = validate_params(CreateClientParams, params)
    response = await request(
        "POST",
        "clients.json",
        "create client",
        json_body=body.model_dump(exclude_none=True),
        forbidden="Forbidden: Only administrators can create clients",
    )
    return parse_response(Client, response)


async def update_client(id: int, params: Union[UpdateClientParams, Dict[str, Any]]) -> Client:
    body = validate_params(UpdateClientParams, params)
    response = await request(
        "PUT",
        f"clients/{id}.json",
        f"update client with ID {id}",
        json_body=body.model_dump(exclude_none=True),
        forbidden="Forbidden: Only administrators can update clients",
    )
    return parse_response(Client, response)


async def delete_client(id: int) -> None:
    await request(
        "DELETE",
        f"clients/{id}.json",
        f"delete client with ID {id}",
        forbidden="Forbidden: Only administrators can delete clients",
        conflict=f"Client {id} cannot be deleted because it still has associated projects",
    )
