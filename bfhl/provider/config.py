"""Provider target resolution and outbound request shaping."""

from urllib.parse import urlsplit

from bfhl.config import Settings
from .exceptions import NotConfiguredError
from .schemas import ProviderOverrides, ProviderTarget, ShapedRequest


GEMINI_HOST = "generativelanguage.googleapis.com"
ONE_WORD_INSTRUCTION = "Answer in ONE WORD only."


def resolve_target(settings: Settings, overrides: ProviderOverrides | None = None) -> ProviderTarget:
    """Pick the endpoint and credential for one provider call.

    A request-scoped URL is only ever paired with a request-scoped key; the
    configured key is sent to the configured URL and nowhere else. A
    request-scoped key alone may still target the configured URL.

    Args:
        settings: Process-wide settings.
        overrides: Values supplied with the current request, if any.

    Returns:
        The resolved ProviderTarget.

    Raises:
        NotConfiguredError: If no URL or no key is available, including a
            request-scoped URL sent without its own key.
    """
    overrides = overrides or ProviderOverrides()
    override_url = (overrides.api_url or "").strip()
    override_key = (overrides.api_key or "").strip()

    if override_url:
        api_url, api_key = override_url, override_key
    else:
        api_url = (settings.AI_API_URL or "").strip()
        api_key = override_key or (settings.AI_API_KEY or "").strip()

    if not api_url:
        raise NotConfiguredError("endpoint URL")
    if not api_key:
        raise NotConfiguredError("API key")
    return ProviderTarget(api_url=api_url, api_key=api_key)


def is_gemini(api_url: str) -> bool:
    """Whether the URL follows the Gemini ``generateContent`` convention."""
    host = (urlsplit(api_url).hostname or "").lower()
    return host == GEMINI_HOST or host.endswith("." + GEMINI_HOST)


def build_prompt(question: str) -> str:
    return f"{ONE_WORD_INSTRUCTION}\nQuestion: {question}"


def shape_request(target: ProviderTarget, prompt: str, max_tokens: int) -> ShapedRequest:
    """Build the outbound request for the target's convention.

    Gemini endpoints take the key as a ``key`` query parameter and a
    ``contents`` envelope. Everything else gets a bearer token and a flat
    ``{prompt, max_tokens}`` body.
    """
    headers = {"Content-Type": "application/json"}

    if is_gemini(target.api_url):
        return ShapedRequest(
            url=target.api_url,
            json={"contents": [{"role": "user", "parts": [{"text": prompt}]}]},
            headers=headers,
            params={"key": target.api_key},
        )

    headers["Authorization"] = f"Bearer {target.api_key}"
    return ShapedRequest(
        url=target.api_url,
        json={"prompt": prompt, "max_tokens": max_tokens},
        headers=headers,
        params={},
    )
