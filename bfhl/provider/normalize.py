"""Normalization of provider replies into a single answer string.

Provider responses drift in shape, so extraction is an ordered list of
matchers. Each matcher is a pure function from untyped JSON to an optional
value; the first one that returns something wins. A value that is not a
string is then searched for nested text fields, and serialized verbatim when
none match. Normalization never raises.
"""

import json
from typing import Any, Callable

Matcher = Callable[[Any], Any | None]

FLAT_FIELDS = ("output", "answer", "text", "result")

# Returned when the provider answered with blank text.
NO_RESPONSE = "NO_RESPONSE"


def _first(items: Any) -> Any | None:
    if isinstance(items, list) and items:
        return items[0]
    return None


def match_candidates(payload: Any) -> Any | None:
    """Gemini style: ``candidates[0].content.parts[*].text``."""
    if not isinstance(payload, dict):
        return None
    candidate = _first(payload.get("candidates"))
    if candidate is None:
        return None
    content = candidate.get("content") if isinstance(candidate, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if isinstance(parts, list):
        texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
        if texts:
            return "".join(texts)
    return candidate


def match_choices(payload: Any) -> Any | None:
    """OpenAI style: ``choices[0].text`` or ``choices[0].message.content``."""
    if not isinstance(payload, dict):
        return None
    choice = _first(payload.get("choices"))
    if choice is None:
        return None
    if isinstance(choice, dict):
        if isinstance(choice.get("text"), str):
            return choice["text"]
        message = choice.get("message")
        if isinstance(message, dict) and message.get("content") is not None:
            return message["content"]
    return choice


def match_flat_field(payload: Any) -> Any | None:
    """A top-level ``output``/``answer``/``text``/``result`` field."""
    if not isinstance(payload, dict):
        return None
    for name in FLAT_FIELDS:
        if payload.get(name) is not None:
            return payload[name]
    return None


def match_bare_string(payload: Any) -> Any | None:
    return payload if isinstance(payload, str) else None


MATCHERS: tuple[Matcher, ...] = (
    match_candidates,
    match_choices,
    match_flat_field,
    match_bare_string,
)


def find_nested_text(value: Any) -> str | None:
    """Look for ``text``, ``message.content``, ``content.text`` or ``content``."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        for item in value:
            found = find_nested_text(item)
            if found is not None:
                return found
        return None
    if not isinstance(value, dict):
        return None

    if isinstance(value.get("text"), str):
        return value["text"]
    message = value.get("message")
    if isinstance(message, dict) and isinstance(message.get("content"), str):
        return message["content"]
    content = value.get("content")
    if isinstance(content, dict) and isinstance(content.get("text"), str):
        return content["text"]
    if isinstance(content, str):
        return content
    if isinstance(content, (dict, list)):
        return find_nested_text(content)
    parts = value.get("parts")
    if isinstance(parts, list):
        return find_nested_text(parts)
    return None


def _serialize(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(value)


def normalize_answer(payload: Any) -> str:
    """Reduce an arbitrarily shaped provider reply to a trimmed string.

    Args:
        payload: Decoded JSON from the provider.

    Returns:
        The extracted answer, trimmed. Unknown shapes come back serialized
        and a blank answer becomes ``NO_RESPONSE``.
    """
    extracted = payload
    for matcher in MATCHERS:
        value = matcher(payload)
        if value is not None:
            extracted = value
            break

    if isinstance(extracted, str):
        answer = extracted
    else:
        nested = find_nested_text(extracted)
        answer = nested if nested is not None else _serialize(extracted)
    return answer.strip() or NO_RESPONSE
