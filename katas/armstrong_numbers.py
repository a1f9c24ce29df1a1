"""Armstrong (narcissistic) number check."""


def is_armstrong_number(num: int) -> bool:
    """Return True if num equals the sum of its digits, each raised to the digit count."""
    if num < 0:
        raise ValueError("num must be non-negative")
    digits = str(num)
    power = len(digits)
    return sum(int(d) ** power for d in digits) == num