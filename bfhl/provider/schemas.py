"""Value objects describing where and how the provider is called."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ProviderOverrides:
    """Per-request provider settings supplied by the client."""

    api_url: str | None = None
    api_key: str | None = None


@dataclass(frozen=True)
class ProviderTarget:
    """A resolved provider endpoint and credential."""

    api_url: str
    api_key: str

    def __repr__(self) -> str:
        return f"ProviderTarget(api_url={self.api_url!r}, api_key='***')"


@dataclass(frozen=True)
class ShapedRequest:
    """Outbound HTTP request, ready to hand to httpx."""

    url: str
    json: dict[str, Any]
    headers: dict[str, str]
    params: dict[str, str]
