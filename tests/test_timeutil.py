import time
from datetime import timedelta

from caco3.timeutil import THAILAND_UTC_OFFSET, duration_since_unix_time


def test_thailand_offset():
    assert THAILAND_UTC_OFFSET.utcoffset(None) == timedelta(hours=7)


def test_since_now_is_small_and_non_negative():
    elapsed = duration_since_unix_time(int(time.time()))
    assert elapsed is not None
    assert timedelta(0) <= elapsed < timedelta(seconds=5)


def test_future_is_none():
    assert duration_since_unix_time(int(time.time()) + 3600) is None


def test_since_epoch_matches_clock():
    before = time.time()
    elapsed = duration_since_unix_time(0)
    after = time.time()
    assert before - 1 <= elapsed.total_seconds() <= after + 1