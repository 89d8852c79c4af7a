from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

import pytest

from ptime import civil_time
from ptime.civil_time import GregorianTm, Timespec

NOWRUZ_1395_PLUS_ONE = 1458518400  # 2016-03-21T00:00:00Z


def test_at_utc_epoch() -> None:
    g_tm = civil_time.at_utc(Timespec(0))

    assert (g_tm.tm_year, g_tm.tm_mon, g_tm.tm_mday) == (70, 0, 1)
    assert (g_tm.tm_hour, g_tm.tm_min, g_tm.tm_sec) == (0, 0, 0)
    assert (g_tm.tm_wday, g_tm.tm_yday, g_tm.tm_utcoff) == (4, 0, 0)


def test_at_utc_before_epoch() -> None:
    g_tm = civil_time.at_utc(Timespec(-1, 250))

    assert (g_tm.tm_year, g_tm.tm_mon, g_tm.tm_mday) == (69, 11, 31)
    assert (g_tm.tm_hour, g_tm.tm_min, g_tm.tm_sec, g_tm.tm_nsec) == (23, 59, 59, 250)
    assert (g_tm.tm_wday, g_tm.tm_yday) == (3, 364)


def test_timespec_round_trip() -> None:
    clock = Timespec(NOWRUZ_1395_PLUS_ONE + 37_800, 5)

    assert civil_time.at_utc(clock).to_timespec() == clock


def test_to_timespec_applies_offset() -> None:
    g_tm = GregorianTm(tm_year=116, tm_mon=2, tm_mday=21, tm_hour=3, tm_min=30, tm_utcoff=12600)

    assert g_tm.to_timespec() == Timespec(NOWRUZ_1395_PLUS_ONE)


@pytest.mark.parametrize(
    ("clock", "delta", "expected"),
    [
        (Timespec(1, 999_999_999), timedelta(microseconds=1), Timespec(2, 999)),
        (Timespec(5), timedelta(seconds=-6), Timespec(-1)),
        (Timespec(0, 500), timedelta(days=1), Timespec(86400, 500)),
    ],
)
def test_timespec_plus_duration(clock: Timespec, delta: timedelta, expected: Timespec) -> None:
    assert clock + delta == expected


def test_timespec_difference() -> None:
    assert Timespec(2, 0) - Timespec(1, 500) == timedelta(microseconds=999_999)
    assert Timespec(5) - timedelta(seconds=6) == Timespec(-1)
    assert Timespec(1) < Timespec(1, 1) < Timespec(2)


def test_datetime_interop() -> None:
    g_tm = civil_time.at_utc(Timespec(NOWRUZ_1395_PLUS_ONE, 1500))

    assert g_tm.to_datetime() == datetime(2016, 3, 21, 0, 0, 0, 1, tzinfo=timezone.utc)

    tehran = datetime(2016, 3, 21, 3, 30, tzinfo=timezone(timedelta(hours=3, minutes=30)))
    from_dt = GregorianTm.from_datetime(tehran)
    assert (from_dt.tm_hour, from_dt.tm_min, from_dt.tm_utcoff) == (3, 30, 12600)
    assert (from_dt.tm_wday, from_dt.tm_yday) == (1, 80)
    assert from_dt == civil_time.at_utc(Timespec(NOWRUZ_1395_PLUS_ONE))


def test_local_time(tehran_tz: None) -> None:
    g_tm = civil_time.at(Timespec(0))

    assert (g_tm.tm_year, g_tm.tm_mon, g_tm.tm_mday) == (70, 0, 1)
    assert (g_tm.tm_hour, g_tm.tm_min) == (3, 30)
    assert (g_tm.tm_utcoff, g_tm.tm_isdst) == (12600, 0)
    assert g_tm.to_timespec() == Timespec(0)


def test_now_utc_reads_the_clock() -> None:
    before = time.time_ns() // 1_000_000_000
    g_tm = civil_time.now_utc()
    after = time.time_ns() // 1_000_000_000

    assert g_tm.tm_utcoff == 0
    assert before <= g_tm.to_timespec().sec <= after
