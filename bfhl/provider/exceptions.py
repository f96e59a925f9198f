"""Custom exceptions for the AI provider adapter."""

from bfhl.exceptions import BFHLError


class ProviderAdapterError(BFHLError):
    """Base exception for provider-related errors."""
    pass


class NotConfiguredError(ProviderAdapterError):
    """Raised when no usable provider endpoint or credential is available.

    Attributes:
        missing: Name of the missing setting.
    """

    status_code = 501

    def __init__(self, missing: str):
        super().__init__(
            message=f"AI provider is not configured: missing {missing}",
            code="NOT_CONFIGURED"
        )
        self.missing = missing


class ProviderError(ProviderAdapterError):
    """Raised when the provider call fails or returns a non-success status.

    Attributes:
        status: Upstream HTTP status, if a response was received.
        detail: Short, credential-free description of the failure.
    """

    status_code = 502

    def __init__(self, detail: str, status: int | None = None):
        prefix = f"AI provider returned {status}" if status is not None else "AI provider call failed"
        super().__init__(
            message=f"{prefix}: {detail}" if detail else prefix,
            code="PROVIDER_ERROR"
        )
        self.status = status
        self.detail = detail


class ClientDisconnectedError(ProviderAdapterError):
    """Raised when the inbound client went away before the answer was ready."""

    # nginx convention for "client closed request"; nobody is left to read it.
    status_code = 499

    def __init__(self):
        super().__init__(
            message="Client disconnected before the AI provider answered",
            code="CLIENT_DISCONNECTED"
        )
