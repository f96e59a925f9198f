"""Per-operation input constraints."""

from typing import Any

from .exceptions import InvalidInputError, UnknownOperationError
from .schemas import Operation


FIBONACCI_MAX_TERMS = 1000
MAX_ARRAY_LENGTH = 10_000
MAX_QUESTION_LENGTH = 2000
# Largest integer a JSON number carries exactly.
MAX_SAFE_INTEGER = 2**53 - 1


def resolve_operation(key: str) -> Operation:
    """Map a body key onto an :class:`Operation`.

    Numeric keys are case-sensitive; ``AI`` matches in any case.

    Raises:
        UnknownOperationError: If the key is not a supported operation.
    """
    if key.upper() == Operation.AI.value:
        return Operation.AI
    try:
        return Operation(key)
    except ValueError:
        raise UnknownOperationError(key)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_integer(field: str, value: Any) -> int:
    if not _is_number(value):
        raise InvalidInputError(field, f"expected an integer, got {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidInputError(field, f"expected an integer, got {value}")
        value = int(value)
    return value


def _check_array(field: str, value: Any, allow_empty: bool) -> list[Any]:
    if not isinstance(value, list):
        raise InvalidInputError(field, "must be an array")
    if not value and not allow_empty:
        raise InvalidInputError(field, "array must not be empty")
    if len(value) > MAX_ARRAY_LENGTH:
        raise InvalidInputError(
            field, f"array length {len(value)} exceeds maximum of {MAX_ARRAY_LENGTH}"
        )
    return value


def _check_magnitude(field: str, value: int) -> int:
    if abs(value) > MAX_SAFE_INTEGER:
        raise InvalidInputError(field, f"value {value} exceeds +/-{MAX_SAFE_INTEGER}")
    return value


def validate_fibonacci(value: Any) -> int:
    """Return the term count for ``fibonacci``: an integer in [0, 1000]."""
    field = Operation.FIBONACCI.value
    n = _as_integer(field, value)
    if n < 0 or n > FIBONACCI_MAX_TERMS:
        raise InvalidInputError(field, f"must be between 0 and {FIBONACCI_MAX_TERMS}")
    return n


def validate_prime(value: Any) -> list[int | float]:
    """Return the candidates for ``prime``.

    The array may be empty. Integral floats are coerced to ``int``; other
    finite numbers are kept as-is and later filtered out as non-prime.
    """
    field = Operation.PRIME.value
    items = _check_array(field, value, allow_empty=True)
    coerced: list[int | float] = []
    for item in items:
        if not _is_number(item):
            raise InvalidInputError(
                field, f"array elements must be numbers, got {type(item).__name__}"
            )
        if isinstance(item, float) and item.is_integer():
            item = int(item)
        if isinstance(item, int):
            _check_magnitude(field, item)
        coerced.append(item)
    return coerced


def validate_numbers(operation: Operation, value: Any) -> list[int]:
    """Return the operands for ``lcm``/``hcf``: a non-empty integer array."""
    field = operation.value
    items = _check_array(field, value, allow_empty=False)
    return [_check_magnitude(field, _as_integer(field, item)) for item in items]


def validate_question(value: Any) -> str:
    """Return the trimmed ``AI`` question: non-empty, at most 2000 characters."""
    field = Operation.AI.value
    if not isinstance(value, str):
        raise InvalidInputError(field, f"must be a string, got {type(value).__name__}")
    question = value.strip()
    if not question:
        raise InvalidInputError(field, "must not be empty")
    if len(question) > MAX_QUESTION_LENGTH:
        raise InvalidInputError(
            field, f"length {len(question)} exceeds maximum of {MAX_QUESTION_LENGTH}"
        )
    return question
