"""Request validation exceptions for the compute endpoint."""

from bfhl.exceptions import BFHLError


class BFHLRequestError(BFHLError):
    """Base exception for client-side request problems."""

    status_code = 400


class UnsupportedMediaTypeError(BFHLRequestError):
    """Raised when the request is not sent as ``application/json``.

    Attributes:
        content_type: The content type the client actually sent.
    """

    status_code = 415

    def __init__(self, content_type: str | None):
        super().__init__(
            message=f"Content-Type must be application/json, got '{content_type or ''}'",
            code="UNSUPPORTED_MEDIA_TYPE"
        )
        self.content_type = content_type


class InvalidBodyError(BFHLRequestError):
    """Raised when the body is not valid JSON or not a JSON object."""

    def __init__(self, reason: str = "Request body must be a JSON object"):
        super().__init__(message=reason, code="INVALID_BODY")


class InvalidKeyCountError(BFHLRequestError):
    """Raised when the body does not hold exactly one key.

    Attributes:
        key_count: Number of keys found in the body.
    """

    def __init__(self, key_count: int):
        super().__init__(
            message=f"Request body must contain exactly one key, found {key_count}",
            code="INVALID_KEY_COUNT"
        )
        self.key_count = key_count


class UnknownOperationError(BFHLRequestError):
    """Raised when the single key is not a supported operation.

    Attributes:
        key: The unrecognized key.
    """

    def __init__(self, key: str):
        super().__init__(
            message=f"Unknown operation '{key}'; expected one of fibonacci, prime, lcm, hcf, AI",
            code="UNKNOWN_OPERATION"
        )
        self.key = key


class InvalidInputError(BFHLRequestError):
    """Raised when an operation's input violates its constraints.

    Attributes:
        field: The operation key whose value was rejected.
        reason: Which constraint was violated.
    """

    def __init__(self, field: str, reason: str):
        super().__init__(
            message=f"Invalid '{field}' input: {reason}",
            code="INVALID_INPUT"
        )
        self.field = field
        self.reason = reason
