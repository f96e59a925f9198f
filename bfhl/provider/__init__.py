"""AI provider adapter - target resolution, request shaping, reply normalization."""

from .schemas import ProviderOverrides, ProviderTarget, ShapedRequest
from .exceptions import (
    ProviderAdapterError,
    NotConfiguredError,
    ProviderError,
    ClientDisconnectedError,
)
from .config import resolve_target, shape_request, build_prompt, is_gemini
from .normalize import NO_RESPONSE, normalize_answer
from .proxy import ask_provider, call_unless_disconnected


__all__ = [
    # Schemas
    "ProviderOverrides",
    "ProviderTarget",
    "ShapedRequest",
    # Exceptions
    "ProviderAdapterError",
    "NotConfiguredError",
    "ProviderError",
    "ClientDisconnectedError",
    # Request shaping
    "resolve_target",
    "shape_request",
    "build_prompt",
    "is_gemini",
    # Normalization
    "normalize_answer",
    "NO_RESPONSE",
    # Client
    "ask_provider",
    "call_unless_disconnected",
]
