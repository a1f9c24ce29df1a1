"""The 'for want of a nail' proverb."""

from collections.abc import Sequence


def build_proverb(items: Sequence[str]) -> str:
    """Return the proverb built from the chain of items."""
    if not items:
        return ""
    lines = [
        f"For want of a {first} the {second} was lost."
        for first, second in zip(items, items[1:])
    ]
    lines.append(f"And all for the want of a {items[0]}.")
    return "\n".join(lines)