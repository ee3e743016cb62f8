"""
Tick users API.
"""
from typing import Any, Dict, List, Union

from tick_api.api.util import parse_response, request, validate_params
from tick_api.types import CreateUserParams, User


async def get_users() -> List[User]:
    """List users on the subscription with projects the caller can see."""
    response = await request("GET", "users.json", "fetch users")
    return parse_response(List[User], response)


async def get_deleted_users() -> List[User]:
    """List deleted users. Administrators only."""
    response = await request(
        "GET",
        "users/deleted.json",
        "fetch deleted users",
        forbidden="Forbidden: Only administrators can access deleted users",
    )
    return parse_response(List[User], response)


async def create_user(params: Union[CreateUserParams, Dict[str, Any]]) -> User:
    """Create a user. Administrators only. Tick expects the body under a "user" key."""
    body = validate_params(CreateUserParams, params)
    response = await request(
        "POST",
        "users.json",
        "create user",
        json_body={"user": body.model_dump(exclude_none=True)},
        forbidden="Forbidden: Only administrators can create users",
    )
    return parse_response(User, response)
