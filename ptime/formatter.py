"""
Token substitution for ``Tm.to_string``.

    yyyy, yyy, y     year (e.g. 1394)
    yy               2-digits representation of year (e.g. 94)
    MMM              the Persian name of month (e.g. فروردین)
    MM               2-digits representation of month (e.g. 01)
    M                month (e.g. 1)
    DD               day of year (starting from 1)
    D                day of year (starting from 0)
    dd               2-digits representation of day (e.g. 01)
    d                day (e.g. 1)
    E                the Persian name of weekday (e.g. شنبه)
    e                the Persian short name of weekday (e.g. ش)
    A                the Persian name of 12-Hour marker (e.g. قبل از ظهر)
    a                the Persian short name of 12-Hour marker (e.g. ق.ظ)
    HH               2-digits representation of hour [00-23]
    H                hour [0-23]
    kk               2-digits representation of hour + 1 [01-24]
    k                hour + 1 [1-24]
    hh               2-digits representation of (hour mod 12) + 1 [01-12]
    h                (hour mod 12) + 1 [1-12]
    KK               2-digits representation of hour [00-11]
    K                hour [0-11]
    mm               2-digits representation of minute [00-59]
    m                minute [0-59]
    ss               2-digits representation of seconds [00-59]
    s                seconds [0-59]
    ns               nanoseconds

The template is scanned once, longest token first, so text produced by one
token is never matched by another.
"""
import re

from ptime.config.constants import (
    PERSIAN_AM_PM,
    PERSIAN_DIGITS_TABLE,
    PERSIAN_MONTHS,
    PERSIAN_SHORT_AM_PM,
    PERSIAN_SHORT_WEEKDAYS,
    PERSIAN_WEEKDAYS,
)
from ptime.errors import lookup


def _hour12(tm):
    return tm.tm_hour - 12 if tm.tm_hour > 11 else tm.tm_hour


_RENDERERS = {
    'yyyy': lambda tm: str(tm.tm_year),
    'yyy': lambda tm: str(tm.tm_year),
    'yy': lambda tm: f"{abs(tm.tm_year) % 100:02d}",
    'y': lambda tm: str(tm.tm_year),
    'MMM': lambda tm: lookup(PERSIAN_MONTHS, tm.tm_mon, 'month'),
    'MM': lambda tm: f"{tm.tm_mon + 1:02d}",
    'M': lambda tm: str(tm.tm_mon + 1),
    'DD': lambda tm: str(tm.tm_yday + 1),
    'D': lambda tm: str(tm.tm_yday),
    'dd': lambda tm: f"{tm.tm_mday:02d}",
    'd': lambda tm: str(tm.tm_mday),
    'E': lambda tm: lookup(PERSIAN_WEEKDAYS, tm.tm_wday, 'weekday'),
    'e': lambda tm: lookup(PERSIAN_SHORT_WEEKDAYS, tm.tm_wday, 'weekday'),
    'A': lambda tm: PERSIAN_AM_PM[tm.tm_hour < 12],
    'a': lambda tm: PERSIAN_SHORT_AM_PM[tm.tm_hour < 12],
    'HH': lambda tm: f"{tm.tm_hour:02d}",
    'H': lambda tm: str(tm.tm_hour),
    'kk': lambda tm: f"{tm.tm_hour + 1:02d}",
    'k': lambda tm: str(tm.tm_hour + 1),
    'hh': lambda tm: f"{_hour12(tm) + 1:02d}",
    'h': lambda tm: str(_hour12(tm) + 1),
    'KK': lambda tm: f"{_hour12(tm):02d}",
    'K': lambda tm: str(_hour12(tm)),
    'mm': lambda tm: f"{tm.tm_min:02d}",
    'm': lambda tm: str(tm.tm_min),
    'ns': lambda tm: str(tm.tm_nsec),
    'ss': lambda tm: f"{tm.tm_sec:02d}",
    's': lambda tm: str(tm.tm_sec),
}

_TOKEN_RE = re.compile('|'.join(sorted(_RENDERERS, key=len, reverse=True)))


def format_tm(tm, template: str, persian_digits: bool = False) -> str:
    """
    Returns the formatted representation of ``tm``.

    :param tm: A ``Tm`` built by a validating constructor.
    :param template: Text with the tokens listed in the module docstring.
    :param persian_digits: Write digits as ۰-۹ instead of 0-9.
    :return: The rendered string.
    """
    result = _TOKEN_RE.sub(lambda match: _RENDERERS[match.group(0)](tm), template)
    if persian_digits:
        result = result.translate(PERSIAN_DIGITS_TABLE)
    return result
