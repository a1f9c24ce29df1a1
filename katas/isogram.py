"""Isogram detection."""


def check(candidate: str) -> bool:
    """Return True if no letter occurs more than once, ignoring case."""
    seen: set[str] = set()
    for ch in candidate.strip().lower():
        if not ch.isalpha():
            continue
        if ch in seen:
            return False
        seen.add(ch)
    return True