from __future__ import annotations

import dataclasses
from datetime import timedelta

from ptime.calendar_utils import from_gregorian_date, from_persian_components, from_persian_date
from ptime.civil_time import GregorianTm


def test_operators() -> None:
    p_tm1 = from_persian_date(1395, 0, 1)
    p_tm2 = from_gregorian_date(2016, 2, 21)

    assert p_tm2 - p_tm1 == timedelta(seconds=24 * 3600)
    assert p_tm2 > p_tm1
    assert not p_tm2 < p_tm1
    assert p_tm2 != p_tm1
    assert p_tm2.compare(p_tm1) == 1
    assert p_tm1.compare(p_tm2) == -1
    assert p_tm1.compare(p_tm1) == 0


def test_add_duration_crosses_new_year() -> None:
    last_day = from_persian_date(1394, 11, 29)

    new_year = last_day.add_duration(timedelta(days=1))

    assert (new_year.tm_year, new_year.tm_mon, new_year.tm_mday) == (1395, 0, 1)
    assert (new_year.tm_wday, new_year.tm_yday) == (1, 0)
    assert last_day + timedelta(days=1) == new_year
    assert timedelta(days=1) + last_day == new_year


def test_sub_duration_goes_back_a_year() -> None:
    new_year = from_persian_date(1395, 0, 1)

    before = new_year.sub_duration(timedelta(seconds=1))

    assert (before.tm_year, before.tm_mon, before.tm_mday) == (1394, 11, 29)
    assert (before.tm_hour, before.tm_min, before.tm_sec) == (23, 59, 59)
    assert (before.tm_wday, before.tm_yday) == (0, 364)
    assert new_year - timedelta(seconds=1) == before


def test_duration_keeps_nanoseconds() -> None:
    tm = from_persian_components(1395, 0, 1, 0, 0, 0, 500)

    later = tm + timedelta(microseconds=1)

    assert later.tm_nsec == 1500
    assert later - tm == timedelta(microseconds=1)


def test_same_instant_with_different_offsets_is_equal() -> None:
    utc = from_gregorian_date(2016, 2, 21)
    tehran = dataclasses.replace(utc, tm_hour=3, tm_min=30, tm_utcoff=12600)

    assert tehran == utc
    assert hash(tehran) == hash(utc)
    assert tehran - utc == timedelta(0)


def test_arithmetic_result_is_utc() -> None:
    tehran = dataclasses.replace(from_gregorian_date(2016, 2, 21), tm_hour=3, tm_min=30, tm_utcoff=12600)

    later = tehran + timedelta(hours=1)

    assert later.tm_utcoff == 0
    assert (later.tm_mday, later.tm_hour, later.tm_min) == (2, 1, 0)


def test_subtracting_civil_time() -> None:
    p_tm = from_gregorian_date(2016, 2, 21)
    g_tm = GregorianTm(tm_year=116, tm_mon=2, tm_mday=20)

    assert p_tm - g_tm == timedelta(days=1)
    assert p_tm > g_tm
    assert p_tm == GregorianTm(tm_year=116, tm_mon=2, tm_mday=21)
