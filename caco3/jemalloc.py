"""Jemalloc configuration through the environment and formatting of its statistics."""

from __future__ import annotations

import os
import platform
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn

from caco3.byte_unit import AdjustedByte

POSSIBLE_MALLOC_CONF_ENVIRONMENT_VARIABLES: tuple[str, ...] = (
    "MALLOC_CONF",
    "_RJEM_MALLOC_CONF",
)

_U64_LIMIT = 2**64


@dataclass
class JemallocConfig:
    """Jemalloc settings."""

    background_thread: bool = False
    max_background_threads: int | None = None
    number_of_arenas: int | None = None
    extra_conf: str | None = None

    def to_config(self) -> str:
        """Render the settings as a malloc configuration string."""
        # Abort the program if jemalloc finds an invalid configuration.
        parts = ["abort_conf:true"]
        # background_thread is enabled at runtime instead, to avoid a deadlock.
        if self.max_background_threads is not None:
            parts.append(f"max_background_threads:{self.max_background_threads}")
        if self.number_of_arenas is not None:
            parts.append(f"narenas:{self.number_of_arenas}")
        if self.extra_conf is not None:
            parts.append(self.extra_conf)
        return ",".join(parts)


def is_background_thread_supported() -> bool:
    """Return True if jemalloc background threads work on this platform."""
    if sys.platform == "darwin":
        return False
    if sys.platform.startswith("linux") and platform.libc_ver()[0] != "glibc":
        # musl builds lack background thread support.
        return False
    return True


def apply_config(config: JemallocConfig, callback: Callable[[str], object]) -> NoReturn:
    """Re-execute the current process with the jemalloc configuration in its environment.

    ``callback`` receives the configuration string just before the process is replaced.
    """
    malloc_conf = config.to_config()
    env = dict(os.environ)
    for name in POSSIBLE_MALLOC_CONF_ENVIRONMENT_VARIABLES:
        env[name] = malloc_conf
    callback(malloc_conf)
    argv = list(sys.orig_argv) or [sys.executable]
    try:
        os.execve(sys.executable, argv, env)
    except OSError as err:
        raise RuntimeError(f"jemalloc: exec error: {err!r}") from err
    raise RuntimeError("jemalloc: exec returned unexpectedly")


def is_configured() -> bool:
    """Return True if a jemalloc configuration variable is set."""
    return any(name in os.environ for name in POSSIBLE_MALLOC_CONF_ENVIRONMENT_VARIABLES)


@dataclass(frozen=True)
class BackgroundThread:
    enabled: bool
    max: int


@dataclass(frozen=True)
class JemallocRawData:
    """Numbers as read from the allocator."""

    active_bytes: int
    allocated_bytes: int
    mapped_bytes: int
    metadata_bytes: int
    resident_bytes: int
    retained_bytes: int
    background_thread: BackgroundThread | None
    number_of_arenas: int


@dataclass(frozen=True)
class Options:
    background_thread: BackgroundThread | None
    number_of_arenas: int


def _format_bytes(n: int) -> str:
    return AdjustedByte.from_bytes(n).format(2)


@dataclass(frozen=True)
class Stats:
    """Allocator statistics in bytes."""

    allocated: int
    resident: int
    active: int
    mapped: int
    metadata: int
    retained: int


@dataclass(frozen=True)
class JemallocInfo:
    options: Options
    stats: Stats

    @classmethod
    def from_raw(cls, raw: JemallocRawData) -> JemallocInfo | None:
        """Build from raw data; None if a byte count is outside the unsigned 64-bit range."""
        counts = (
            raw.allocated_bytes,
            raw.resident_bytes,
            raw.active_bytes,
            raw.mapped_bytes,
            raw.metadata_bytes,
            raw.retained_bytes,
        )
        if any(not 0 <= n < _U64_LIMIT for n in counts):
            return None
        return cls(
            options=Options(raw.background_thread, raw.number_of_arenas),
            stats=Stats(*counts),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the serializable form, with byte counts in binary units."""
        background = self.options.background_thread
        stats = self.stats
        return {
            "options": {
                "background_thread": None
                if background is None
                else {"enabled": background.enabled, "max": background.max},
                "number_of_arenas": self.options.number_of_arenas,
            },
            "stats": {
                "allocated": _format_bytes(stats.allocated),
                "resident": _format_bytes(stats.resident),
                "active": _format_bytes(stats.active),
                "mapped": _format_bytes(stats.mapped),
                "metadata": _format_bytes(stats.metadata),
                "retained": _format_bytes(stats.retained),
            },
        }