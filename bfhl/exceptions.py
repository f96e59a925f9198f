"""Base exceptions for the BFHL service."""


class BFHLError(Exception):
    """Base exception for all BFHL service errors."""

    status_code = 500

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class InternalError(BFHLError):
    """Raised when handling fails for a reason the client cannot fix."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message=message, code="INTERNAL_ERROR")
