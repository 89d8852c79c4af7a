from ptime.civil_date import CivilDate
from ptime.civil_time import GregorianTm
from ptime.config.constants import GREGORIAN_TO_PERSIAN_WEEKDAY, PERSIAN_TO_GREGORIAN_WEEKDAY
from ptime.errors import InvariantViolation, lookup
from ptime.persian.algorithmic_converter import AlgorithmicConverter
from ptime.tm import Tm


def persian_weekday(gregorian_wday: int) -> int:
    return lookup(GREGORIAN_TO_PERSIAN_WEEKDAY, gregorian_wday, 'weekday')


def gregorian_weekday(persian_wday: int) -> int:
    return lookup(PERSIAN_TO_GREGORIAN_WEEKDAY, persian_wday, 'weekday')


def persian_jdn(tm: Tm) -> int:
    if tm.tm_yday > 365 or tm.tm_yday < 0:
        raise InvariantViolation(f"invalid day of year value of {tm.tm_yday}")
    return AlgorithmicConverter.to_jdn(tm.tm_year, tm.tm_mon + 1, tm.tm_mday)


def to_gregorian(tm: Tm) -> GregorianTm:
    """
    Converts Persian calendar to Gregorian calendar.

    Time of day, nanoseconds, UTC offset and DST flag are carried unchanged.
    """
    year, month, day = CivilDate.from_jdn(persian_jdn(tm))
    return GregorianTm(
        tm_sec=tm.tm_sec,
        tm_min=tm.tm_min,
        tm_hour=tm.tm_hour,
        tm_mday=day,
        tm_mon=month - 1,
        tm_year=year - 1900,
        tm_wday=gregorian_weekday(tm.tm_wday),
        tm_yday=CivilDate.day_of_year(year, month, day),
        tm_isdst=tm.tm_isdst,
        tm_utcoff=tm.tm_utcoff,
        tm_nsec=tm.tm_nsec,
    )


def from_gregorian(gregorian_tm: GregorianTm) -> Tm:
    """
    Converts Gregorian calendar to Persian calendar.

    The date is taken from year, month and day. The weekday is mapped from
    ``gregorian_tm.tm_wday`` and is not recomputed, so a hand-built
    ``GregorianTm`` must fill it in; ``civil_time.at_utc``, ``civil_time.at``
    and ``GregorianTm.from_datetime`` always do.
    """
    year, month, day = AlgorithmicConverter.from_jdn(gregorian_tm.to_jdn())
    return Tm(
        tm_sec=gregorian_tm.tm_sec,
        tm_min=gregorian_tm.tm_min,
        tm_hour=gregorian_tm.tm_hour,
        tm_mday=day,
        tm_mon=month - 1,
        tm_year=year,
        tm_wday=persian_weekday(gregorian_tm.tm_wday),
        tm_yday=AlgorithmicConverter.day_of_year(month, day),
        tm_isdst=gregorian_tm.tm_isdst,
        tm_utcoff=gregorian_tm.tm_utcoff,
        tm_nsec=gregorian_tm.tm_nsec,
    )
