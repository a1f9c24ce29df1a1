"""Leap years in the Gregorian calendar."""


def is_leap_year(year: int) -> bool:
    """Return True if year is a leap year."""
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0