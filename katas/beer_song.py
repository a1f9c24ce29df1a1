"""Verses of the '99 bottles of beer' song."""


def verse(n: int) -> str:
    """Return the verse for n bottles, 0 <= n <= 99."""
    if n == 0:
        return (
            "No more bottles of beer on the wall, no more bottles of beer.\n"
            "Go to the store and buy some more, 99 bottles of beer on the wall.\n"
        )
    if n == 1:
        return (
            "1 bottle of beer on the wall, 1 bottle of beer.\n"
            "Take it down and pass it around, no more bottles of beer on the wall.\n"
        )
    if n == 2:
        return (
            "2 bottles of beer on the wall, 2 bottles of beer.\n"
            "Take one down and pass it around, 1 bottle of beer on the wall.\n"
        )
    if 2 < n <= 99:
        return (
            f"{n} bottles of beer on the wall, {n} bottles of beer.\n"
            f"Take one down and pass it around, {n - 1} bottles of beer on the wall.\n"
        )
    raise ValueError(f"no verse for {n} bottles")


def sing(start: int, end: int) -> str:
    """Return the verses from start down to end, separated by blank lines."""
    return "\n".join(verse(n) for n in range(start, end - 1, -1))