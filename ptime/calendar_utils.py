import logging
from types import SimpleNamespace
from typing import Optional

from ptime import civil_time
from ptime.civil_date import CivilDate
from ptime.civil_time import GregorianTm, Timespec
from ptime.converter import from_gregorian, persian_weekday
from ptime.persian.algorithmic_converter import AlgorithmicConverter
from ptime.tm import Tm
from ptime.validator import is_gregorian_date_valid, is_persian_date_valid, is_time_valid

log = logging.getLogger(__name__)


def persian_to_jd(year, month, day):
    """
    Determine Julian day from Persian date (1-based month)
    """
    return AlgorithmicConverter.to_jdn(year, month, day)


def jd_to_persian(jd):
    """
    Calculate Persian date from Julian day
    """
    return AlgorithmicConverter.from_jdn(jd)


def civil_to_jd(year, month, day):
    """
    Determine Julian day from Civil date (1-based month)
    """
    return CivilDate.to_jdn(year, month, day)


def jd_to_civil(jd):
    """
    Calculate Civil date from Julian day
    """
    return CivilDate.from_jdn(jd)


def empty_tm() -> Tm:
    """
    Zeroed scratch value; it does not name a valid date.
    """
    return Tm()


def from_gregorian_date(g_year: int, g_month: int, g_day: int) -> Optional[Tm]:
    """
    :param g_month: 0-based, 0 = January.
    """
    return from_gregorian_components(g_year, g_month, g_day, 0, 0, 0, 0)


def from_persian_date(p_year: int, p_month: int, p_day: int) -> Optional[Tm]:
    """
    :param p_month: 0-based, 0 = Farvardin.
    """
    return from_persian_components(p_year, p_month, p_day, 0, 0, 0, 0)


def from_gregorian_components(g_year, g_month, g_day, hour, minute, second, nanosecond) -> Optional[Tm]:
    """
    Dates up to 1582-10-14 are read in the Julian calendar. The ten days
    1582-10-05..14 that the reform dropped are accepted but land on
    1582-10-15..24, so ``to_gregorian`` does not give them back.
    """
    if not (is_time_valid(hour, minute, second, nanosecond) and is_gregorian_date_valid(g_year, g_month, g_day)):
        log.debug("Rejecting Gregorian components %s-%s-%s %s:%s:%s.%s",
                  g_year, g_month, g_day, hour, minute, second, nanosecond)
        return None

    gregorian_tm = GregorianTm(
        tm_sec=second,
        tm_min=minute,
        tm_hour=hour,
        tm_mday=g_day,
        tm_mon=g_month,
        tm_year=g_year - 1900,
        tm_nsec=nanosecond,
    )
    return at_utc(gregorian_tm.to_timespec())


def from_persian_components(p_year, p_month, p_day, hour, minute, second, nanosecond) -> Optional[Tm]:
    if not (is_time_valid(hour, minute, second, nanosecond) and is_persian_date_valid(p_year, p_month, p_day)):
        log.debug("Rejecting Persian components %s-%s-%s %s:%s:%s.%s",
                  p_year, p_month, p_day, hour, minute, second, nanosecond)
        return None

    jdn = AlgorithmicConverter.to_jdn(p_year, p_month + 1, p_day)
    return Tm(
        tm_sec=second,
        tm_min=minute,
        tm_hour=hour,
        tm_mday=p_day,
        tm_mon=p_month,
        tm_year=p_year,
        tm_wday=persian_weekday(CivilDate.weekday(jdn)),
        tm_yday=AlgorithmicConverter.day_of_year(p_month + 1, p_day),
        tm_nsec=nanosecond,
    )


def at_utc(clock: Timespec) -> Tm:
    """
    Creates a Persian time from the number of seconds since January 1, 1970 in UTC
    """
    return from_gregorian(civil_time.at_utc(clock))


def at(clock: Timespec) -> Tm:
    """
    Creates a Persian time from the number of seconds since January 1, 1970 in the local time zone
    """
    return from_gregorian(civil_time.at(clock))


def now_utc() -> Tm:
    return from_gregorian(civil_time.now_utc())


def now() -> Tm:
    return from_gregorian(civil_time.now())


def from_datetime(dt) -> Tm:
    """
    Converts a ``datetime``; naive values are taken as UTC.
    """
    return from_gregorian(GregorianTm.from_datetime(dt))


def from_jdatetime(jdt) -> Optional[Tm]:
    """
    Converts a ``jdatetime.datetime``, ignoring its tzinfo.
    """
    return from_persian_components(jdt.year, jdt.month - 1, jdt.day, jdt.hour, jdt.minute, jdt.second,
                                   jdt.microsecond * 1000)


def get_today_persian_date():
    today = now()
    return SimpleNamespace(year=today.tm_year, month=today.tm_mon + 1, day=today.tm_mday)


def jalali_datetime_str(gregorian_dt):
    """
    e.g. "1395/01/02 10:33 ب.ظ"
    """
    tm = from_datetime(gregorian_dt)
    # 12-hour clock as strftime %I: 12 at midnight and noon
    hour = tm.tm_hour % 12 or 12
    return f"{tm.to_string('yyyy/MM/dd')} {hour:02d}{tm.to_string(':mm a')}"
