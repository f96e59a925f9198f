"""Service layer for the compute endpoint: validation and dispatch."""

from typing import Any, assert_never

import httpx
from starlette.requests import Request
from structlog import get_logger

from bfhl.config import Settings
from bfhl.kernels import fibonacci, filter_primes, reduce_gcd, reduce_lcm
from bfhl.provider import (
    ProviderOverrides,
    ask_provider,
    call_unless_disconnected,
    resolve_target,
)

from .schemas import Operation, RequestEnvelope
from .validation import (
    resolve_operation,
    validate_fibonacci,
    validate_numbers,
    validate_prime,
    validate_question,
)

logger = get_logger()


async def answer_question(
    question: str,
    settings: Settings,
    client: httpx.AsyncClient,
    overrides: ProviderOverrides | None = None,
    http_request: Request | None = None,
) -> str:
    """Forward a validated question to the AI provider.

    Args:
        question: Trimmed question text.
        settings: Process settings with provider defaults.
        client: Shared HTTP client.
        overrides: Per-request endpoint/credential overrides.
        http_request: Inbound request; when given, the provider call is
            abandoned if the client disconnects.

    Returns:
        The normalized answer.

    Raises:
        NotConfiguredError: If no endpoint or credential can be resolved.
        ProviderError: If the provider call fails.
    """
    target = resolve_target(settings, overrides)
    call = ask_provider(
        client=client,
        target=target,
        question=question,
        timeout=settings.AI_TIMEOUT_SECONDS,
        max_tokens=settings.AI_MAX_TOKENS,
    )
    if http_request is None:
        return await call
    return await call_unless_disconnected(http_request, call)


async def dispatch(
    envelope: RequestEnvelope,
    settings: Settings,
    client: httpx.AsyncClient,
    overrides: ProviderOverrides | None = None,
    http_request: Request | None = None,
) -> Any:
    """Run the operation named by the envelope.

    Args:
        envelope: Parsed single-key request.
        settings: Process settings.
        client: Shared HTTP client, used only by the AI operation.
        overrides: Per-request provider overrides, used only by the AI operation.
        http_request: Inbound request, used only by the AI operation.

    Returns:
        The operation result: a list for fibonacci/prime, an int for
        lcm/hcf, a string for AI.

    Raises:
        UnknownOperationError: If the key is not a supported operation.
        InvalidInputError: If the value violates the operation's constraints.
        NotConfiguredError: If AI is requested without a usable provider.
        ProviderError: If the provider call fails.
    """
    operation = resolve_operation(envelope.key)
    logger.debug("dispatch", operation=operation.value)

    match operation:
        case Operation.FIBONACCI:
            return fibonacci(validate_fibonacci(envelope.value))
        case Operation.PRIME:
            return filter_primes(validate_prime(envelope.value))
        case Operation.LCM:
            return reduce_lcm(validate_numbers(operation, envelope.value))
        case Operation.HCF:
            return reduce_gcd(validate_numbers(operation, envelope.value))
        case Operation.AI:
            question = validate_question(envelope.value)
            return await answer_question(
                question,
                settings=settings,
                client=client,
                overrides=overrides,
                http_request=http_request,
            )
        case _:
            assert_never(operation)
