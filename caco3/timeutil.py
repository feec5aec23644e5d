"""Time helpers."""

from __future__ import annotations

import time
from datetime import timedelta, timezone

THAILAND_UTC_OFFSET = timezone(timedelta(hours=7))
"""Thailand UTC offset (+07:00)."""


def duration_since_unix_time(unix_time: int) -> timedelta | None:
    """Return the time elapsed since ``unix_time`` seconds, or None if it lies in the future."""
    elapsed = time.time() - unix_time
    if elapsed < 0:
        return None
    return timedelta(seconds=elapsed)