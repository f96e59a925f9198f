"""Deterministic number-theory kernels.

Every function here is pure: no I/O, no shared state, identical output for
identical input.
"""

from functools import reduce
from math import isqrt
from typing import Any, Iterable

# Trial division stays fast below this bound; above it Miller-Rabin is used.
TRIAL_DIVISION_LIMIT = 1_000_000

# Deterministic witness set, exact for every n < 3.3 * 10**24.
MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers starting 0, 1, 1, 2, ...

    Args:
        n: Number of terms. ``0`` yields an empty list.

    Returns:
        List of length ``n``.
    """
    series: list[int] = []
    a, b = 0, 1
    for _ in range(n):
        series.append(a)
        a, b = b, a + b
    return series


def _miller_rabin(n: int) -> bool:
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for base in MILLER_RABIN_BASES:
        x = pow(base, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def is_prime(x: Any) -> bool:
    """Check whether ``x`` is a prime integer.

    Anything that is not an ``int`` (floats, bools, strings) is reported as
    not prime instead of raising.

    Args:
        x: Candidate value.

    Returns:
        True iff ``x`` is an integer >= 2 with no divisor in [2, isqrt(x)].
    """
    if isinstance(x, bool) or not isinstance(x, int):
        return False
    if x < 2:
        return False
    if x < 4:
        return True
    if x % 2 == 0:
        return False

    if x >= TRIAL_DIVISION_LIMIT:
        return _miller_rabin(x)

    for i in range(3, isqrt(x) + 1, 2):
        if x % i == 0:
            return False
    return True


def filter_primes(xs: Iterable[Any]) -> list[Any]:
    """Keep the primes of ``xs`` in their original order."""
    return [x for x in xs if is_prime(x)]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|``; ``gcd(0, 0) == 0``."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero when either operand is zero."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def reduce_gcd(xs: list[int]) -> int:
    """Left-fold :func:`gcd` across a non-empty list.

    Raises:
        ValueError: If ``xs`` is empty.
    """
    if not xs:
        raise ValueError("reduce_gcd requires at least one value")
    return reduce(gcd, xs[1:], abs(xs[0]))


def reduce_lcm(xs: list[int]) -> int:
    """Left-fold :func:`lcm` across a non-empty list.

    Raises:
        ValueError: If ``xs`` is empty.
    """
    if not xs:
        raise ValueError("reduce_lcm requires at least one value")
    return reduce(lcm, xs[1:], abs(xs[0]))
