"""Step counts for the Collatz conjecture."""

from __future__ import annotations


def collatz_positive(n: int) -> int:
    """Return the number of Collatz steps needed to reach 1 from n (n >= 1)."""
    if n < 1:
        raise ValueError("n must be positive")
    steps = 0
    while n != 1:
        n = n // 2 if n % 2 == 0 else n * 3 + 1
        steps += 1
    return steps


def collatz(n: int) -> int | None:
    """Return the Collatz step count for n, or None when n is below 1."""
    if n < 1:
        return None
    return collatz_positive(n)