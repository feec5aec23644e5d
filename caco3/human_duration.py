"""Human readable durations such as ``1d 5h 7m 3s``."""

from __future__ import annotations

import enum
import itertools
from collections.abc import Iterator
from dataclasses import dataclass

MINUTE_SECONDS = 60
HOUR_SECONDS = 60 * MINUTE_SECONDS
DAY_SECONDS = 24 * HOUR_SECONDS


class Unit(enum.Enum):
    """Duration units, from biggest to smallest."""

    DAY = "d"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"


@dataclass(frozen=True)
class DurationComponent:
    """One part of a duration, like ``5h``."""

    ALL_COMPONENTS = 4

    value: int
    unit: Unit

    def __str__(self) -> str:
        return f"{self.value}{self.unit.value}"


@dataclass(frozen=True, order=True)
class HumanDuration:
    """A whole number of seconds, displayable in days, hours, minutes and seconds."""

    seconds: int

    def __post_init__(self) -> None:
        if self.seconds < 0:
            raise ValueError("duration must not be negative")

    @classmethod
    def from_secs(cls, secs: int) -> HumanDuration:
        return cls(secs)

    def days(self) -> int | None:
        return self.seconds // DAY_SECONDS if self.seconds >= DAY_SECONDS else None

    def hours(self) -> int | None:
        if self.seconds >= HOUR_SECONDS:
            return self.seconds // HOUR_SECONDS % 24
        return None

    def minutes(self) -> int | None:
        if self.seconds >= MINUTE_SECONDS:
            return self.seconds // MINUTE_SECONDS % 60
        return None

    def secs(self) -> int:
        return self.seconds % MINUTE_SECONDS

    def components(self) -> Iterator[DurationComponent]:
        """Yield the non-empty components from the biggest unit down to seconds."""
        parts = (
            (self.days(), Unit.DAY),
            (self.hours(), Unit.HOUR),
            (self.minutes(), Unit.MINUTE),
            (self.secs(), Unit.SECOND),
        )
        for value, unit in parts:
            if value is not None:
                yield DurationComponent(value, unit)

    def format(self, num_components: int) -> str:
        """Format using at most ``num_components`` of the biggest components."""
        return " ".join(
            str(c) for c in itertools.islice(self.components(), num_components)
        )

    def format_all(self) -> str:
        return self.format(DurationComponent.ALL_COMPONENTS)

    def __str__(self) -> str:
        return self.format_all()