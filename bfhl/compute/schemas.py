"""Pydantic schemas for the compute request and response envelopes."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Operation(StrEnum):
    """The closed set of operations the endpoint accepts."""

    FIBONACCI = "fibonacci"
    PRIME = "prime"
    LCM = "lcm"
    HCF = "hcf"
    AI = "AI"


class RequestEnvelope(BaseModel):
    """The single member extracted from a request body.

    Attributes:
        key: Member name exactly as the client sent it.
        value: Raw, not yet validated member value.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Operation key as sent by the client")
    value: Any = Field(default=None, description="Raw operation payload")


class BFHLResponse(BaseModel):
    """Uniform success/failure wrapper returned by every endpoint.

    Exactly one of ``data`` and ``error`` is set. Serialize with
    ``exclude_none=True`` so the unused one is omitted.

    Attributes:
        is_success: Whether the request succeeded.
        official_email: Identifying value configured for this deployment.
        data: Result on success.
        error: Error message on failure.
    """

    model_config = ConfigDict(frozen=True)

    is_success: bool = Field(..., description="Whether the request succeeded")
    official_email: str = Field(default="", description="Configured identifying value")
    data: Any | None = Field(default=None, description="Result on success")
    error: str | None = Field(default=None, description="Error message on failure")

    @classmethod
    def success(cls, official_email: str, data: Any) -> "BFHLResponse":
        """Create a successful response.

        Args:
            official_email: Identifying value from settings.
            data: Result data.

        Returns:
            BFHLResponse with data populated.
        """
        return cls(is_success=True, official_email=official_email, data=data)

    @classmethod
    def failure(cls, official_email: str, error: str) -> "BFHLResponse":
        """Create a failed response.

        Args:
            official_email: Identifying value from settings.
            error: Human readable error message.

        Returns:
            BFHLResponse with error populated.
        """
        return cls(is_success=False, official_email=official_email, error=error)

    def to_content(self) -> dict[str, Any]:
        """JSON-ready dict without the unused ``data``/``error`` member."""
        content = self.model_dump(exclude={"data", "error"})
        if self.is_success:
            content["data"] = self.data
        else:
            content["error"] = self.error
        return content
