"""Grains of wheat on a chessboard."""


def square(s: int) -> int:
    """Return the number of grains on square s (1 to 64)."""
    if not 1 <= s <= 64:
        raise ValueError("Square must be between 1 and 64")
    return 2 ** (s - 1)


def total() -> int:
    """Return the number of grains on the whole board."""
    return sum(square(s) for s in range(1, 65))