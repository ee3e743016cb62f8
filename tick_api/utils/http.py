"""
HTTP client utilities for the Tick API.
"""
from __future__ import annotations
import httpx
from tick_api.config import settings


def create_http_client(
    user_agent: str,
    timeout: float | None = None,
    **kwargs
) -> httpx.AsyncClient:
    """
    Create a configured async HTTP client with:
    - Timeout from TICK_TIMEOUT (20s by default)
    - The caller's user-agent (Tick requires one identifying the integration)
    - No retries; every call is sent exactly once
    """
    headers = kwargs.pop("headers", {})
    headers.setdefault("User-Agent", user_agent)

    timeout_config = httpx.Timeout(timeout or settings.TICK_TIMEOUT, connect=10.0)

    transport = kwargs.pop("transport", None) or httpx.AsyncHTTPTransport(retries=0)

    return httpx.AsyncClient(
        timeout=timeout_config,
        headers=headers,
        transport=transport,
        **kwargs
    )
