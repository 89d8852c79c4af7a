"""
Broken-down Gregorian civil time and absolute timestamps.

``GregorianTm`` keeps the classic ``struct tm`` conventions: months are 0-based,
years count from 1900, weekdays start on Sunday and the day of year is 0-based.
Timestamps are computed through the JDN so that dates before the 1582 reform are
read in the Julian calendar, matching ``CivilDate``.
"""
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ptime.abstract_tm import AbstractTm
from ptime.civil_date import CivilDate
from ptime.config.constants import NANOSECONDS_PER_SECOND, SECONDS_PER_DAY, UNIX_EPOCH_JDN

_ONE_MICROSECOND = timedelta(microseconds=1)


@dataclass(frozen=True, order=True)
class Timespec:
    """
    Seconds and nanoseconds since 1970-01-01T00:00:00Z.
    """
    sec: int
    nsec: int = 0

    @staticmethod
    def normalized(sec: int, nsec: int) -> 'Timespec':
        carry, nsec = divmod(nsec, NANOSECONDS_PER_SECOND)
        return Timespec(sec + carry, nsec)

    def __add__(self, other):
        if not isinstance(other, timedelta):
            return NotImplemented
        seconds, micros = divmod(other // _ONE_MICROSECOND, 1_000_000)
        return Timespec.normalized(self.sec + seconds, self.nsec + micros * 1000)

    def __sub__(self, other):
        if isinstance(other, Timespec):
            nanos = (self.sec - other.sec) * NANOSECONDS_PER_SECOND + self.nsec - other.nsec
            return timedelta(microseconds=nanos // 1000)
        if isinstance(other, timedelta):
            return self + (-other)
        return NotImplemented


@dataclass(frozen=True, eq=False)
class GregorianTm(AbstractTm):
    tm_sec: int = 0
    tm_min: int = 0
    tm_hour: int = 0
    tm_mday: int = 0
    tm_mon: int = 0
    tm_year: int = 0
    tm_wday: int = 0
    tm_yday: int = 0
    tm_isdst: int = 0
    tm_utcoff: int = 0
    tm_nsec: int = 0

    def to_jdn(self):
        return CivilDate.to_jdn(self.tm_year + 1900, self.tm_mon + 1, self.tm_mday)

    def to_timespec(self):
        seconds = (self.to_jdn() - UNIX_EPOCH_JDN) * SECONDS_PER_DAY
        seconds += self.tm_hour * 3600 + self.tm_min * 60 + self.tm_sec
        return Timespec(seconds - self.tm_utcoff, self.tm_nsec)

    def to_datetime(self):
        """
        Aware ``datetime`` for the same fields. ``datetime`` is proleptic
        Gregorian, so this is only meaningful after the 1582 reform.
        """
        return datetime(
            self.tm_year + 1900,
            self.tm_mon + 1,
            self.tm_mday,
            self.tm_hour,
            self.tm_min,
            self.tm_sec,
            self.tm_nsec // 1000,
            tzinfo=timezone(timedelta(seconds=self.tm_utcoff)),
        )

    @classmethod
    def from_datetime(cls, dt: datetime) -> 'GregorianTm':
        """
        Naive datetimes are taken as UTC.
        """
        offset = dt.utcoffset()
        dst = dt.dst()
        jdn = CivilDate.to_jdn(dt.year, dt.month, dt.day)
        return cls(
            tm_sec=dt.second,
            tm_min=dt.minute,
            tm_hour=dt.hour,
            tm_mday=dt.day,
            tm_mon=dt.month - 1,
            tm_year=dt.year - 1900,
            tm_wday=CivilDate.weekday(jdn),
            tm_yday=CivilDate.day_of_year(dt.year, dt.month, dt.day),
            tm_isdst=1 if dst else 0,
            tm_utcoff=int(offset.total_seconds()) if offset is not None else 0,
            tm_nsec=dt.microsecond * 1000,
        )


def _broken_down(seconds, nsec, utcoff, isdst):
    days, seconds = divmod(seconds, SECONDS_PER_DAY)
    jdn = days + UNIX_EPOCH_JDN
    year, month, day = CivilDate.from_jdn(jdn)
    hour, rest = divmod(seconds, 3600)
    minute, second = divmod(rest, 60)
    return GregorianTm(
        tm_sec=second,
        tm_min=minute,
        tm_hour=hour,
        tm_mday=day,
        tm_mon=month - 1,
        tm_year=year - 1900,
        tm_wday=CivilDate.weekday(jdn),
        tm_yday=CivilDate.day_of_year(year, month, day),
        tm_isdst=isdst,
        tm_utcoff=utcoff,
        tm_nsec=nsec,
    )


def at_utc(clock: Timespec) -> GregorianTm:
    return _broken_down(clock.sec, clock.nsec, 0, 0)


def at(clock: Timespec) -> GregorianTm:
    """
    Breaks ``clock`` down in the local time zone of the process.
    """
    local = time.localtime(clock.sec)
    return _broken_down(clock.sec + local.tm_gmtoff, clock.nsec, local.tm_gmtoff, max(local.tm_isdst, 0))


def current_timespec() -> Timespec:
    return Timespec(*divmod(time.time_ns(), NANOSECONDS_PER_SECOND))


def now_utc() -> GregorianTm:
    return at_utc(current_timespec())


def now() -> GregorianTm:
    return at(current_timespec())
