"""String reversal by character."""


def reverse(text: str) -> str:
    """Return text with its characters in reverse order."""
    return text[::-1]