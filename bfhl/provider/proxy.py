"""HTTP client for forwarding questions to the AI provider."""

import asyncio
from typing import Awaitable, TypeVar
from urllib.parse import quote, quote_plus

import httpx
from starlette.requests import Request
from structlog import get_logger

from bfhl.config import DEFAULT_AI_MAX_TOKENS, DEFAULT_AI_TIMEOUT_SECONDS
from .config import build_prompt, shape_request
from .exceptions import ClientDisconnectedError, ProviderError
from .normalize import normalize_answer
from .schemas import ProviderTarget

logger = get_logger()

T = TypeVar("T")

MAX_DETAIL_CHARS = 200
DISCONNECT_POLL_SECONDS = 0.5


def redact(text: str, secret: str) -> str:
    """Remove ``secret`` from ``text``, raw and in its URL-encoded form."""
    if secret:
        for form in (secret, quote(secret, safe=""), quote_plus(secret)):
            text = text.replace(form, "***")
    return text


async def ask_provider(
    client: httpx.AsyncClient,
    target: ProviderTarget,
    question: str,
    timeout: float = DEFAULT_AI_TIMEOUT_SECONDS,
    max_tokens: int = DEFAULT_AI_MAX_TOKENS,
) -> str:
    """Send a question to the provider and return the normalized answer.

    The call is attempted exactly once.

    Args:
        client: Shared HTTP client.
        target: Resolved endpoint and credential.
        question: Validated, trimmed question.
        timeout: Request timeout in seconds.
        max_tokens: Token budget for providers using the generic shape.

    Returns:
        The trimmed answer string.

    Raises:
        ProviderError: On timeout, transport failure, non-2xx status or a
            body that is not JSON.
    """
    shaped = shape_request(target, build_prompt(question), max_tokens)

    try:
        response = await client.post(
            shaped.url,
            json=shaped.json,
            headers=shaped.headers,
            params=shaped.params,
            timeout=timeout,
        )
    except httpx.TimeoutException:
        logger.warning("provider_timeout", timeout_seconds=timeout)
        raise ProviderError(detail=f"timed out after {timeout}s")
    except httpx.RequestError as e:
        reason = redact(str(e), target.api_key) or e.__class__.__name__
        logger.warning("provider_unreachable", reason=reason)
        raise ProviderError(detail=f"request failed: {reason}")

    if not 200 <= response.status_code < 300:
        detail = redact(response.text[:MAX_DETAIL_CHARS], target.api_key)
        logger.warning("provider_error_status", status=response.status_code)
        raise ProviderError(detail=detail, status=response.status_code)

    try:
        payload = response.json()
    except ValueError:
        logger.warning("provider_malformed_reply", status=response.status_code)
        raise ProviderError(detail="reply is not valid JSON", status=response.status_code)

    return normalize_answer(payload)


async def call_unless_disconnected(
    request: Request,
    awaitable: Awaitable[T],
    poll_interval: float = DISCONNECT_POLL_SECONDS,
) -> T:
    """Await ``awaitable`` but cancel it if the inbound client disconnects.

    Args:
        request: The inbound request being served.
        awaitable: The outstanding work, typically :func:`ask_provider`.
        poll_interval: Seconds between disconnect checks.

    Returns:
        Whatever ``awaitable`` returns.

    Raises:
        ClientDisconnectedError: If the client left first.
    """
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info("client_disconnected", path=request.url.path)
                raise ClientDisconnectedError()
    finally:
        if not task.done():
            task.cancel()
