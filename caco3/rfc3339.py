"""RFC 3339 datetimes rounded down to milliseconds or seconds."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))"
)


def floor_to_millisecond(value: datetime) -> datetime:
    """Drop everything below whole milliseconds."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def floor_to_second(value: datetime) -> datetime:
    """Drop the fractional part of the seconds."""
    return value.replace(microsecond=0)


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 datetime with offset; digits below microseconds are dropped."""
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 datetime: {text!r}")
    year, month, day, hour, minute, second, frac, zulu, sign, off_h, off_m = match.groups()
    if zulu:
        tz = timezone.utc
    else:
        hours, minutes = int(off_h), int(off_m)
        if hours > 23 or minutes > 59:
            raise ValueError(f"invalid offset in {text!r}")
        delta = timedelta(hours=hours, minutes=minutes)
        tz = timezone(-delta if sign == "-" else delta)
    micros = int(frac[:6].ljust(6, "0")) if frac else 0
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micros, tzinfo=tz
    )


def format_rfc3339(value: datetime) -> str:
    """Format an offset-aware datetime as RFC 3339, using ``Z`` for UTC."""
    offset = value.utcoffset()
    if offset is None:
        raise ValueError("datetime must carry a UTC offset")
    if not 0 <= value.year <= 9999:
        raise ValueError("year out of range for RFC 3339")
    total = int(offset.total_seconds())
    if total % 60 or offset.microseconds:
        raise ValueError("offset with seconds cannot be formatted as RFC 3339")
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    if total == 0:
        return text + "Z"
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def serialize_millisecond(value: datetime | None) -> str | None:
    if value is None:
        return None
    return format_rfc3339(floor_to_millisecond(value))


def serialize_second(value: datetime | None) -> str | None:
    if value is None:
        return None
    return format_rfc3339(floor_to_second(value))


def deserialize_millisecond(text: str | None) -> datetime | None:
    if text is None:
        return None
    return floor_to_millisecond(parse_rfc3339(text))


def deserialize_second(text: str | None) -> datetime | None:
    if text is None:
        return None
    return floor_to_second(parse_rfc3339(text))