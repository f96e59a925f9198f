"""Parsing of the single-key request envelope.

These checks are operation-agnostic and run before any per-operation
validation, in this order: content type, JSON decoding, body shape, key count.
"""

import json
from typing import Any

from .exceptions import InvalidBodyError, InvalidKeyCountError, UnsupportedMediaTypeError
from .schemas import RequestEnvelope


JSON_MEDIA_TYPE = "application/json"


def check_content_type(content_type: str | None) -> None:
    """Require an ``application/json`` media type.

    Parameters such as ``charset=utf-8`` are allowed.

    Raises:
        UnsupportedMediaTypeError: For any other media type or a missing header.
    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise UnsupportedMediaTypeError(content_type)


def decode_body(raw: bytes) -> Any:
    """Decode a raw request body as JSON.

    Raises:
        InvalidBodyError: If the body is empty or not valid JSON.
    """
    if not raw.strip():
        raise InvalidBodyError("Request body is empty")
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError):
        raise InvalidBodyError("Request body is not valid JSON")


def parse_envelope(body: Any) -> RequestEnvelope:
    """Extract the single ``{key: value}`` member of a decoded body.

    Args:
        body: Decoded JSON value.

    Returns:
        RequestEnvelope holding the key and its raw value.

    Raises:
        InvalidBodyError: If the body is not a JSON object.
        InvalidKeyCountError: If the object does not have exactly one member.
    """
    if not isinstance(body, dict):
        raise InvalidBodyError()

    if len(body) != 1:
        raise InvalidKeyCountError(len(body))

    (key, value), = body.items()
    return RequestEnvelope(key=key, value=value)
