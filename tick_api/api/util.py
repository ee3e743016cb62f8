"""
Shared plumbing for the Tick resource functions.

Resource functions take only domain arguments. Credentials come from the
active configuration, which TickClient scopes around each call with
use_configuration(). The active value lives in a ContextVar, so every
asyncio task sees its own configuration and concurrent calls through
different clients do not interfere.
"""
from __future__ import annotations
import time
import logging
from contextlib import contextmanager
from contextvars import ContextVar, Token
from functools import lru_cache
from typing import Any, Dict, Iterator, List, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from tick_api.config import TickConfig, settings
from tick_api.errors import (
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    RequestError,
    ResponseValidationError,
    ValidationError,
)
from tick_api.utils.http import create_http_client

logger = logging.getLogger(__name__)

NO_ACTIVE_CONFIGURATION = (
    "no active configuration; configuration must be established before this call"
)

P = TypeVar("P", bound=BaseModel)

_active_config: ContextVar[Optional[TickConfig]] = ContextVar(
    "tick_active_config", default=None
)


def set_active_configuration(config: Optional[TickConfig]) -> Token:
    """
    Replace the active configuration. Returns a token for ContextVar.reset().

    The value is scoped to the current context, not the whole process: a
    configuration set in one asyncio task or thread is not visible in another.
    Tasks created after this call inherit it.
    """
    return _active_config.set(config)


def get_active_configuration() -> Optional[TickConfig]:
    return _active_config.get()


@contextmanager
def use_configuration(config: TickConfig) -> Iterator[TickConfig]:
    """
    Make config active for the duration of the block.
    The previous value is restored on exit, whether the block raised or not.
    """
    token = _active_config.set(config)
    try:
        yield config
    finally:
        _active_config.reset(token)


def _require_configuration() -> TickConfig:
    config = _active_config.get()
    if config is None:
        raise ConfigurationError(NO_ACTIVE_CONFIGURATION)
    return config


def build_url(path: str) -> str:
    """Absolute API URL for a path relative to the subscription's API root."""
    config = _require_configuration()
    base_url = settings.TICK_BASE_URL.rstrip("/")
    return f"{base_url}/{config.subscription_id}/api/{settings.TICK_API_VERSION}/{path}"


def build_headers(include_content_type: bool = True) -> Dict[str, str]:
    """Authorization and User-Agent headers, plus Content-Type for requests with a body."""
    config = _require_configuration()
    headers = {
        "Authorization": f"Token token={config.api_token}",
        "User-Agent": config.user_agent,
    }
    if include_content_type:
        headers["Content-Type"] = "application/json; charset=utf-8"
    return headers


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, Any]) -> str:
    """URL-encoded query string from every field that is not None."""
    return urlencode(
        {key: _query_value(value) for key, value in params.items() if value is not None}
    )


def with_query(path: str, params: Mapping[str, Any]) -> str:
    query = build_query(params)
    return f"{path}?{query}" if query else path


def _describe_errors(errors: List[Dict[str, Any]]) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ())) or "value"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return ", ".join(parts)


def validate_params(shape: Type[P], params: Union[P, Mapping[str, Any], None]) -> P:
    """
    Validate caller input against a parameter shape.
    Raises ValidationError naming every invalid field.
    """
    if isinstance(params, shape):
        return params
    try:
        return shape.model_validate(params if params is not None else {})
    except PydanticValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        raise ValidationError(
            f"Invalid {shape.__name__}: {_describe_errors(errors)}",
            errors=errors,
        ) from e


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def parse_response(shape: Any, response: httpx.Response) -> Any:
    """
    Parse a JSON response body and validate it against shape.
    Unknown keys are dropped; anything else that does not match raises
    ResponseValidationError with pydantic's error list.
    """
    try:
        data = response.json()
    except ValueError as e:
        raise ResponseValidationError(
            f"Response from {response.request.url} is not valid JSON",
            [{"type": "json_invalid", "loc": (), "msg": str(e)}],
        ) from e

    try:
        return _adapter(shape).validate_python(data)
    except PydanticValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        raise ResponseValidationError(
            f"Unexpected response from {response.request.url}: {_describe_errors(errors)}",
            errors,
        ) from e


async def request(
    method: str,
    path: str,
    operation: str,
    json_body: Optional[Any] = None,
    forbidden: Optional[str] = None,
    conflict: Optional[str] = None,
) -> httpx.Response:
    """
    Send exactly one request to the Tick API and map failure statuses.

    operation is a short phrase ("fetch clients", "delete task with ID 7")
    used in error messages. forbidden and conflict override the messages for
    403 and 406; a 406 is only treated as a conflict when conflict is given.
    """
    has_body = method in ("POST", "PUT")
    url = build_url(path)
    headers = build_headers(include_content_type=has_body)

    logger.debug(f"Tick request: {method} {url}", extra={"method": method, "url": url})
    start_time = time.monotonic()

    async with create_http_client(user_agent=headers["User-Agent"]) as client:
        response = await client.request(
            method,
            url,
            headers=headers,
            json=json_body if has_body else None,
        )

    duration_ms = (time.monotonic() - start_time) * 1000
    logger.debug(
        f"Tick response: {method} {url} status={response.status_code}",
        extra={
            "method": method,
            "url": url,
            "status": response.status_code,
            "duration_ms": round(duration_ms, 2),
        },
    )

    if response.status_code == 403:
        raise ForbiddenError(forbidden or f"Forbidden: not allowed to {operation}")

    if response.status_code == 406 and conflict:
        raise ConflictError(conflict)

    if not response.is_success:
        raise RequestError(
            f"Failed to {operation}: {response.status_code} {response.reason_phrase}",
            response.status_code,
            response.reason_phrase,
        )

    return response
