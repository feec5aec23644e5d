from datetime import datetime, timedelta, timezone

import pytest

from caco3.rfc3339 import (
    deserialize_millisecond,
    deserialize_second,
    floor_to_millisecond,
    floor_to_second,
    format_rfc3339,
    parse_rfc3339,
    serialize_millisecond,
    serialize_second,
)

PLUS7 = timezone(timedelta(hours=7))
DATETIME = datetime(2022, 1, 1, 19, 0, 10, 123456, tzinfo=PLUS7)
UTC_DATETIME = datetime(2022, 1, 1, 19, 0, 10, 123456, tzinfo=timezone.utc)
NANO_TEXT = "2022-01-01T19:00:10.123456789+07:00"


def test_deserialize_millisecond():
    assert deserialize_millisecond(NANO_TEXT) == datetime(2022, 1, 1, 19, 0, 10, 123000, tzinfo=PLUS7)


def test_deserialize_millisecond_none():
    assert deserialize_millisecond(None) is None


def test_serialize_millisecond():
    assert serialize_millisecond(DATETIME) == "2022-01-01T19:00:10.123+07:00"
    assert serialize_millisecond(None) is None
    assert serialize_millisecond(UTC_DATETIME) == "2022-01-01T19:00:10.123Z"


def test_deserialize_second():
    assert deserialize_second(NANO_TEXT) == datetime(2022, 1, 1, 19, 0, 10, tzinfo=PLUS7)
    assert deserialize_second(None) is None


def test_serialize_second():
    assert serialize_second(DATETIME) == "2022-01-01T19:00:10+07:00"
    assert serialize_second(None) is None
    assert serialize_second(UTC_DATETIME) == "2022-01-01T19:00:10Z"


def test_module_examples():
    value = datetime(2022, 1, 1, 1, 23, 45, 123456, tzinfo=PLUS7)
    millis = serialize_millisecond(value)
    assert millis == "2022-01-01T01:23:45.123+07:00"
    assert deserialize_millisecond(millis) == datetime(2022, 1, 1, 1, 23, 45, 123000, tzinfo=PLUS7)
    secs = serialize_second(value)
    assert secs == "2022-01-01T01:23:45+07:00"
    assert deserialize_second(secs) == datetime(2022, 1, 1, 1, 23, 45, tzinfo=PLUS7)


def test_floor_helpers():
    assert floor_to_millisecond(DATETIME).microsecond == 123000
    assert floor_to_second(DATETIME).microsecond == 0


def test_negative_offset_round_trip():
    tz = timezone(-timedelta(hours=5, minutes=30))
    value = datetime(2020, 6, 15, 8, 30, 0, tzinfo=tz)
    text = format_rfc3339(value)
    assert text == "2020-06-15T08:30:00-05:30"
    assert parse_rfc3339(text) == value


def test_parse_zulu():
    assert parse_rfc3339("1979-05-27T07:32:00Z") == datetime(1979, 5, 27, 7, 32, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "text",
    ["2022-01-01T19:00:10", "2022-01-01", "not a date", "2022-13-01T00:00:00Z", "2022-01-01T00:00:00+25:00"],
)
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_rfc3339(text)


def test_format_naive_rejected():
    with pytest.raises(ValueError):
        format_rfc3339(datetime(2022, 1, 1))