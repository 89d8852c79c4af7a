from ptime.config.constants import GREGORIAN_MONTH_DAYS, PERSIAN_MONTH_DAYS
from ptime.leap_year import is_gregorian_leap, is_persian_leap


def is_time_valid(hour: int, minute: int, second: int, nanosecond: int) -> bool:
    return (
        0 <= hour <= 23
        and 0 <= minute <= 59
        and 0 <= second <= 59
        and 0 <= nanosecond <= 999_999_999
    )


def is_persian_date_valid(year: int, month: int, day: int) -> bool:
    """
    :param month: 0-based, 0 = Farvardin.
    """
    if month < 0 or month > 11:
        return False
    return 1 <= day <= PERSIAN_MONTH_DAYS[month][is_persian_leap(year)]


def is_gregorian_date_valid(year: int, month: int, day: int) -> bool:
    """
    :param month: 0-based, 0 = January.
    """
    if month < 0 or month > 11:
        return False
    return 1 <= day <= GREGORIAN_MONTH_DAYS[month][is_gregorian_leap(year)]
