"""Square of sums versus sum of squares."""


def square_of_sum(n: int) -> int:
    """Return (1 + 2 + ... + n) squared."""
    total = n * (n + 1) // 2
    return total * total


def sum_of_squares(n: int) -> int:
    """Return 1^2 + 2^2 + ... + n^2."""
    return sum(k * k for k in range(n + 1))


def difference(n: int) -> int:
    """Return square_of_sum(n) - sum_of_squares(n)."""
    return square_of_sum(n) - sum_of_squares(n)