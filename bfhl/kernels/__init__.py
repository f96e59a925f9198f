"""Pure numeric kernels used by the compute endpoint."""

from .numeric import (
    fibonacci,
    is_prime,
    filter_primes,
    gcd,
    lcm,
    reduce_gcd,
    reduce_lcm,
)


__all__ = [
    "fibonacci",
    "is_prime",
    "filter_primes",
    "gcd",
    "lcm",
    "reduce_gcd",
    "reduce_lcm",
]
