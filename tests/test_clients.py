"""
Tests for the clients endpoints.
"""
import json

import httpx
import pytest
import respx

from tick_api.errors import ConflictError, ForbiddenError, RequestError, ResponseValidationError

BASE_URL = "https://www.tickspot.com/acme/api/v2"


@pytest.fixture
def client_with_projects(client_data):
    return {
        **client_data,
        "id": 42,
        "projects": {
            "count": 3,
            "url": f"{BASE_URL}/clients/42/projects.json",
            "updated_at": "2024-01-15T09:00:00.000-05:00",
        },
    }


@pytest.mark.asyncio
@respx.mock
async def test_get_all_clients(tick_client, client_data):
    """Archived clients come from clients/all.json."""
    archived = {**client_data, "id": 2, "archive": True}
    respx.get(f"{BASE_URL}/clients/all.json").mock(
        return_value=httpx.Response(200, json=[client_data, archived])
    )

    clients = await tick_client.get_all_clients()

    assert [c.archive for c in clients] == [False, True]


@pytest.mark.asyncio
@respx.mock
async def test_get_client_keeps_integer_id(tick_client, client_with_projects):
    """Client ids stay integers and the project summary is included."""
    respx.get(f"{BASE_URL}/clients/42.json").mock(
        return_value=httpx.Response(200, json=client_with_projects)
    )

    client = await tick_client.get_client(42)

    assert client.id == 42
    assert isinstance(client.id, int)
    assert client.projects.count == 3


@pytest.mark.asyncio
@respx.mock
async def test_get_client_rejects_string_id(tick_client, client_with_projects):
    """A string id in the response is not coerced."""
    respx.get(f"{BASE_URL}/clients/42.json").mock(
        return_value=httpx.Response(200, json={**client_with_projects, "id": "42"})
    )

    with pytest.raises(ResponseValidationError) as exc_info:
        await tick_client.get_client(42)

    assert exc_info.value.errors[0]["loc"] == ("id",)


@pytest.mark.asyncio
@respx.mock
async def test_create_client_sends_unwrapped_body(tick_client, client_data):
    """Client bodies are not wrapped under a key."""
    route = respx.post(f"{BASE_URL}/clients.json").mock(
        return_value=httpx.Response(201, json=client_data)
    )

    client = await tick_client.create_client({"name": "Acme"})

    assert json.loads(route.calls.last.request.content) == {"name": "Acme"}
    assert client.name == "Acme"


@pytest.mark.asyncio
@respx.mock
async def test_create_client_forbidden(tick_client):
    """Only administrators can create clients."""
    respx.post(f"{BASE_URL}/clients.json").mock(return_value=httpx.Response(403))

    with pytest.raises(ForbiddenError, match="Only administrators can create clients"):
        await tick_client.create_client({"name": "Acme"})


@pytest.mark.asyncio
@respx.mock
async def test_update_client(tick_client, client_data):
    """Updates are sent with PUT."""
    route = respx.put(f"{BASE_URL}/clients/1.json").mock(
        return_value=httpx.Response(200, json={**client_data, "archive": True})
    )

    client = await tick_client.update_client(1, {"name": "Acme", "archive": True})

    assert json.loads(route.calls.last.request.content) == {"name": "Acme", "archive": True}
    assert client.archive is True


@pytest.mark.asyncio
@respx.mock
async def test_delete_client(tick_client):
    """A successful delete returns None and sends no content type."""
    route = respx.delete(f"{BASE_URL}/clients/1.json").mock(
        return_value=httpx.Response(204)
    )

    assert await tick_client.delete_client(1) is None
    assert "content-type" not in route.calls.last.request.headers


@pytest.mark.asyncio
@respx.mock
async def test_delete_client_forbidden(tick_client):
    """403 on delete names the administrator requirement."""
    respx.delete(f"{BASE_URL}/clients/1.json").mock(return_value=httpx.Response(403))

    with pytest.raises(ForbiddenError) as exc_info:
        await tick_client.delete_client(1)

    assert "administrators" in exc_info.value.message


@pytest.mark.asyncio
@respx.mock
async def test_delete_client_with_projects(tick_client):
    """406 means the client still has projects."""
    respx.delete(f"{BASE_URL}/clients/1.json").mock(return_value=httpx.Response(406))

    with pytest.raises(ConflictError) as exc_info:
        await tick_client.delete_client(1)

    assert "associated projects" in exc_info.value.message
    assert exc_info.value.code == "conflict"


@pytest.mark.asyncio
@respx.mock
async def test_delete_client_server_error(tick_client):
    """Other failures carry the status code and text."""
    respx.delete(f"{BASE_URL}/clients/1.json").mock(return_value=httpx.Response(500))

    with pytest.raises(RequestError) as exc_info:
        await tick_client.delete_client(1)

    assert exc_info.value.status_code == 500
    assert exc_info.value.status_text == "Internal Server Error"
    assert exc_info.value.message == "Failed to delete client with ID 1: 500 Internal Server Error"
