from ptime.config.constants import GREGORIAN_MONTH_OFFSETS, GREGORIAN_REFORM_JDN
from ptime.leap_year import is_gregorian_leap
from ptime.util.math_util import trunc_div


class CivilDate:
    """
    Gregorian side of the JDN pivot. Dates up to 1582-10-14 are read and
    produced in the Julian calendar.
    """

    @staticmethod
    def to_jdn(year: int, month: int, day: int) -> int:
        if (year > 1582) or (year == 1582 and month > 10) or (year == 1582 and month == 10 and day > 14):
            a = trunc_div(month - 14, 12)
            return (
                trunc_div(1461 * (year + 4800 + a), 4)
                + trunc_div(367 * (month - 2 - 12 * a), 12)
                - trunc_div(3 * trunc_div(year + 4900 + a, 100), 4)
                + day
                - 32075
            )
        else:
            return CivilDate.julian_to_jdn(year, month, day)

    @staticmethod
    def from_jdn(jdn: int):
        if jdn > GREGORIAN_REFORM_JDN:
            l = jdn + 68569
            n = (4 * l) // 146097
            l -= (146097 * n + 3) // 4
            i = (4000 * (l + 1)) // 1461001
            l = l - (1461 * i) // 4 + 31
            j = (80 * l) // 2447
            day = l - (2447 * j) // 80
            l = j // 11
            month = j + 2 - 12 * l
            year = 100 * (n - 49) + i + l
            return year, month, day
        else:
            return CivilDate.julian_from_jdn(jdn)

    @staticmethod
    def julian_from_jdn(jdn: int):
        j = jdn + 1402
        k = (j - 1) // 1461
        l = j - 1461 * k
        n = (l - 1) // 365 - l // 1461
        i = l - 365 * n + 30
        j = (80 * i) // 2447
        day = i - (2447 * j) // 80
        i = j // 11
        month = j + 2 - 12 * i
        year = 4 * k + n + i - 4716
        return year, month, day

    @staticmethod
    def julian_to_jdn(year: int, month: int, day: int) -> int:
        return (
            367 * year
            - (7 * (year + 5001 + trunc_div(month - 9, 7))) // 4
            + trunc_div(275 * month, 9)
            + day
            + 1729777
        )

    @staticmethod
    def day_of_year(year: int, month: int, day: int) -> int:
        """
        0-based day of year for a 1-based month.
        """
        return GREGORIAN_MONTH_OFFSETS[is_gregorian_leap(year)][month - 1] + day - 1

    @staticmethod
    def weekday(jdn: int) -> int:
        """
        Weekday of a JDN, 0 = Sunday.
        """
        return (jdn + 1) % 7
