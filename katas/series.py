"""Contiguous substrings of a given length."""


def series(digits: str, length: int) -> list[str]:
    """Return every contiguous run of length characters in digits, in order."""
    if length == 0:
        return [""] * (len(digits) + 1)
    return [digits[i : i + length] for i in range(len(digits) - length + 1)]