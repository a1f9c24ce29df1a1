"""Sum of all multiples of given factors below a limit."""

from collections.abc import Iterable


def sum_of_multiples(limit: int, factors: Iterable[int]) -> int:
    """Return the sum of the numbers in [1, limit) that are a multiple of any factor."""
    factors = list(factors)
    return sum(n for n in range(1, limit) if any(n % f == 0 for f in factors))