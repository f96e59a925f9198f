"""Global dependencies for the application."""

from typing import Annotated

import httpx
from fastapi import Header, Query, Request

from bfhl.provider import ProviderOverrides


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Dependency to get the global shared HTTP client.

    This client is initialized in main.py lifespan and shared across requests
    to enable connection pooling (keep-alive).

    Args:
        request: The FastAPI request object.

    Returns:
        The global httpx.AsyncClient instance.
    """
    return request.app.state.http_client


async def get_provider_overrides(
    x_ai_api_url: Annotated[str | None, Header()] = None,
    x_ai_api_key: Annotated[str | None, Header()] = None,
    ai_url: Annotated[str | None, Query()] = None,
    ai_key: Annotated[str | None, Query()] = None,
) -> ProviderOverrides:
    """Collect per-request AI provider overrides.

    Headers (``X-AI-API-URL``, ``X-AI-API-Key``) take precedence over the
    ``ai_url``/``ai_key`` query parameters. Blank values count as absent.
    """
    return ProviderOverrides(
        api_url=(x_ai_api_url or ai_url or "").strip() or None,
        api_key=(x_ai_api_key or ai_key or "").strip() or None,
    )
