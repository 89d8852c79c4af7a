from __future__ import annotations

import time

import pytest

# Persian (year, month, day, weekday, day of year) paired with the Gregorian
# (year, month, day, weekday, day of year) of the same day. Months are 0-based.
PERSIAN_GREGORIAN = (
    ((1383, 3, 15, 2, 107), (2004, 6, 5, 1, 186)),
    ((1394, 11, 9, 1, 344), (2016, 1, 28, 0, 58)),
    ((1394, 9, 11, 6, 286), (2016, 0, 1, 5, 0)),
    ((1394, 11, 11, 3, 346), (2016, 2, 1, 2, 60)),
    ((1394, 11, 29, 0, 364), (2016, 2, 19, 6, 78)),
    ((1395, 0, 1, 1, 0), (2016, 2, 20, 0, 79)),
    ((1395, 0, 2, 2, 1), (2016, 2, 21, 1, 80)),
    ((1395, 0, 3, 3, 2), (2016, 2, 22, 2, 81)),
    ((1395, 9, 11, 0, 286), (2016, 11, 31, 6, 365)),
)


@pytest.fixture
def tehran_tz(monkeypatch: pytest.MonkeyPatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "IRST-03:30")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
