"""Compute module - single-key request envelope, validation and dispatch."""

from .schemas import Operation, RequestEnvelope, BFHLResponse
from .exceptions import (
    BFHLRequestError,
    UnsupportedMediaTypeError,
    InvalidBodyError,
    InvalidKeyCountError,
    UnknownOperationError,
    InvalidInputError,
)
from .envelope import check_content_type, decode_body, parse_envelope
from .service import dispatch


__all__ = [
    # Schemas
    "Operation",
    "RequestEnvelope",
    "BFHLResponse",
    # Exceptions
    "BFHLRequestError",
    "UnsupportedMediaTypeError",
    "InvalidBodyError",
    "InvalidKeyCountError",
    "UnknownOperationError",
    "InvalidInputError",
    # Envelope
    "check_content_type",
    "decode_body",
    "parse_envelope",
    # Service
    "dispatch",
]
