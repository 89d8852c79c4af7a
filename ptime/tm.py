from dataclasses import dataclass
from datetime import timedelta, timezone

import jdatetime

from ptime.abstract_tm import AbstractTm
from ptime.config.constants import DEFAULT_FORMAT
from ptime.leap_year import is_persian_leap
from ptime.util.twelve_months_year import TwelveMonthsYear


@dataclass(frozen=True, eq=False)
class Tm(AbstractTm):
    """
    Represents the components of a moment in time in the Persian calendar.

    Build instances through ``ptime.calendar_utils``; the constructors there
    validate the components and derive ``tm_wday`` and ``tm_yday``.
    """

    tm_sec: int = 0
    tm_min: int = 0
    tm_hour: int = 0
    # day of month - [1, 31]
    tm_mday: int = 0
    # month since Farvardin - [0, 11]
    tm_mon: int = 0
    tm_year: int = 0
    # weekday since Shanbeh - [0, 6]. 0 = Shanbeh, ..., 6 = Jomeh
    tm_wday: int = 0
    # day of year since Farvardin 1 - [0, 365]
    tm_yday: int = 0
    tm_isdst: int = 0
    tm_utcoff: int = 0
    tm_nsec: int = 0

    def __str__(self):
        return self.to_string(DEFAULT_FORMAT)

    def to_gregorian(self):
        from ptime.converter import to_gregorian
        return to_gregorian(self)

    def to_jdn(self):
        from ptime.converter import persian_jdn
        return persian_jdn(self)

    def to_timespec(self):
        """
        Returns the number of seconds since January 1, 1970 UTC.
        """
        return self.to_gregorian().to_timespec()

    def is_leap(self):
        return is_persian_leap(self.tm_year)

    def to_local(self):
        """
        Converts a UTC time to the local time zone; other values are returned as is.
        """
        from ptime.calendar_utils import at
        return at(self.to_timespec()) if self.tm_utcoff == 0 else self

    def to_utc(self):
        from ptime.calendar_utils import at_utc
        return self if self.tm_utcoff == 0 else at_utc(self.to_timespec())

    def to_string(self, template, persian_digits=False):
        from ptime.formatter import format_tm
        return format_tm(self, template, persian_digits=persian_digits)

    def to_jdatetime(self):
        return jdatetime.datetime(
            self.tm_year,
            self.tm_mon + 1,
            self.tm_mday,
            self.tm_hour,
            self.tm_min,
            self.tm_sec,
            self.tm_nsec // 1000,
            tzinfo=timezone(timedelta(seconds=self.tm_utcoff)),
        )

    # The result is always in UTC: the offset of ``self`` is not kept.
    def add_duration(self, duration: timedelta):
        from ptime.calendar_utils import at_utc
        return at_utc(self.to_timespec() + duration)

    def sub_duration(self, duration: timedelta):
        from ptime.calendar_utils import at_utc
        return at_utc(self.to_timespec() - duration)

    def __add__(self, other):
        if isinstance(other, timedelta):
            return self.add_duration(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, timedelta):
            return self.sub_duration(other)
        return super().__sub__(other)

    def month_start_of_months_distance(self, months_distance):
        from ptime.calendar_utils import from_persian_date
        return TwelveMonthsYear.month_start_of_months_distance(self, months_distance, from_persian_date)

    def months_distance_to(self, date):
        return TwelveMonthsYear.months_distance_to(self, date)
