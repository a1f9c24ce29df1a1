"""Raindrop sounds for the factors 3, 5 and 7."""

_SOUNDS = ((3, "Pling"), (5, "Plang"), (7, "Plong"))


def raindrops(n: int) -> str:
    """Return the raindrop sounds for n, or n itself when it has none."""
    sounds = "".join(sound for factor, sound in _SOUNDS if n % factor == 0)
    return sounds or str(n)