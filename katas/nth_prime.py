"""The n-th prime number, counting from zero."""

from collections.abc import Iterator
from itertools import count, islice


def _primes() -> Iterator[int]:
    found: list[int] = []
    for candidate in count(2):
        if all(candidate % p for p in _up_to_root(found, candidate)):
            found.append(candidate)
            yield candidate


def _up_to_root(primes: list[int], n: int) -> Iterator[int]:
    for p in primes:
        if p * p > n:
            return
        yield p


def nth(n: int) -> int:
    """Return the 0-indexed n-th prime number."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return next(islice(_primes(), n, None))