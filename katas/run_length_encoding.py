"""Run-length encoding and decoding."""

from itertools import groupby


def encode(source: str) -> str:
    """Encode runs of repeated characters as <count><char>; single characters stay as they are."""
    parts = []
    for ch, run in groupby(source):
        length = sum(1 for _ in run)
        parts.append(f"{length}{ch}" if length > 1 else ch)
    return "".join(parts)


def _run_length(digits: str) -> int:
    try:
        return int(digits)
    except ValueError:
        return 1


def decode(source: str) -> str:
    """Expand <count><char> runs; a character without a count appears once."""
    parts = []
    digits = ""
    for ch in source:
        if ch.isnumeric():
            digits += ch
        else:
            parts.append(ch * _run_length(digits))
            digits = ""
    return "".join(parts)