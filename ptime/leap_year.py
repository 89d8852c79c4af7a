from ptime.util.math_util import divider


def is_persian_leap(year: int) -> bool:
    """
    Persian leap year by the arithmetic 33-year rule used across the 2820-year cycle.
    """
    return divider(25 * year + 11, 33) < 8


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
