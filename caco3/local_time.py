"""Current local time and UTC offset, with the time zone cached by default.

The time zone comes from the ``TZ`` environment variable when it is set and
valid, otherwise from the system's local time zone file. If that file does not
exist, UTC is used. Set ``CACO3_CACHE_TIMEZONE`` to a falsy value such as
``false`` to look the time zone up again on every call.
"""

from __future__ import annotations

import os
import re
import threading
import time
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from caco3.config import is_truthy

CACHE_TIMEZONE_ENV = "CACO3_CACHE_TIMEZONE"
LOCALTIME_FILE = "/etc/localtime"

# A POSIX TZ value without daylight saving rules, such as "UTC0" or "<+07>-7".
_POSIX_FIXED = re.compile(
    r"(?P<name>[A-Za-z]{3,}|<[A-Za-z0-9+\-]{3,}>)"
    r"(?P<sign>[+-]?)(?P<hours>\d{1,2})"
    r"(?::(?P<minutes>\d{1,2})(?::(?P<seconds>\d{1,2}))?)?"
)


class _TimezoneCache:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.use_cache: bool | None = None
        self.timezone: tzinfo | None = None

    def clear(self) -> None:
        with self.lock:
            self.use_cache = None
            self.timezone = None


_cache = _TimezoneCache()


def _clear_cache() -> None:
    """Forget the cached time zone and caching setting."""
    _cache.clear()


def _use_cache_timezone() -> bool:
    with _cache.lock:
        if _cache.use_cache is None:
            value = os.environ.get(CACHE_TIMEZONE_ENV)
            _cache.use_cache = True if value is None else is_truthy(value)
        return _cache.use_cache


def _parse_posix_fixed(text: str) -> tzinfo | None:
    match = _POSIX_FIXED.fullmatch(text)
    if match is None:
        return None
    hours = int(match["hours"])
    minutes = int(match["minutes"] or 0)
    seconds = int(match["seconds"] or 0)
    if hours > 24 or minutes > 59 or seconds > 59:
        return None
    # POSIX offsets count westward, so the sign is the opposite of UTC's.
    offset = timedelta(hours=hours, minutes=minutes, seconds=seconds)
    return timezone(offset if match["sign"] == "-" else -offset)


def _from_tz_string(text: str) -> tzinfo:
    fixed = _parse_posix_fixed(text)
    if fixed is not None:
        return fixed
    name = text.removeprefix(":")
    if os.path.isabs(name):
        with open(name, "rb") as fh:
            return ZoneInfo.from_file(fh, key=name)
    return ZoneInfo(name)


def _system_local() -> tzinfo:
    with open(LOCALTIME_FILE, "rb") as fh:
        return ZoneInfo.from_file(fh, key="localtime")


def _unix_timezone() -> tzinfo:
    tz_string = os.environ.get("TZ")
    if tz_string is not None:
        try:
            return _from_tz_string(tz_string)
        except (ValueError, ZoneInfoNotFoundError, OSError):
            # An invalid TZ falls back to the system time zone.
            pass
    return _system_local()


def _resolve_timezone() -> tzinfo | None:
    """Return the time zone, or None when no local time zone file exists."""
    if _use_cache_timezone():
        with _cache.lock:
            if _cache.timezone is not None:
                return _cache.timezone
        try:
            tz = _unix_timezone()
        except FileNotFoundError:
            return None
        with _cache.lock:
            if _cache.timezone is None:
                _cache.timezone = tz
            return _cache.timezone
    try:
        return _unix_timezone()
    except FileNotFoundError:
        return None


def _local_utc_offset_at(unix_timestamp: float | None) -> timezone:
    if os.name != "posix":
        offset = datetime.now().astimezone().utcoffset()
        return timezone(offset if offset is not None else timedelta(0))
    try:
        tz = _resolve_timezone()
    except (OSError, ValueError) as err:
        raise RuntimeError(
            "couldn't determine UtcOffset for unix platform, "
            "Invalid /etc/localtime  or TZ is unset"
        ) from err
    if tz is None:
        return timezone.utc
    timestamp = time.time() if unix_timestamp is None else unix_timestamp
    offset = datetime.fromtimestamp(timestamp, tz).utcoffset()
    if offset is None or offset == timedelta(0):
        return timezone.utc
    return timezone(offset)


def local_now() -> datetime:
    """Return the current time in the local time zone."""
    now = datetime.now(timezone.utc)
    offset = _local_utc_offset_at(now.timestamp())
    return now.astimezone(offset)


def local_utc_offset() -> timezone:
    """Return the current local UTC offset as a fixed-offset time zone."""
    return _local_utc_offset_at(None)