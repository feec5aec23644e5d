"""Byte counts shown in the most appropriate binary unit, such as ``2 KiB``."""

from __future__ import annotations

from dataclasses import dataclass

_BINARY_UNITS: tuple[tuple[str, int], ...] = (
    ("YiB", 1024**8),
    ("ZiB", 1024**7),
    ("EiB", 1024**6),
    ("PiB", 1024**5),
    ("TiB", 1024**4),
    ("GiB", 1024**3),
    ("MiB", 1024**2),
    ("KiB", 1024),
)


def _format_float(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class AdjustedByte:
    """A byte count expressed as a value and a binary unit."""

    value: float
    unit: str

    @classmethod
    def from_bytes(cls, n: int) -> AdjustedByte:
        """Pick the biggest binary unit not larger than ``n`` bytes."""
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError("byte count must be an integer")
        if n < 0:
            raise ValueError("byte count must not be negative")
        for unit, size in _BINARY_UNITS:
            if n >= size:
                return cls(n / size, unit)
        return cls(float(n), "B")

    def format(self, precision: int) -> str:
        """Format the value with ``precision`` digits after the decimal point."""
        return f"{self.value:.{precision}f} {self.unit}"

    def __str__(self) -> str:
        return f"{_format_float(self.value)} {self.unit}"


def serialize_appropriate_binary_unit(n: int | None) -> str | None:
    """Serialize a byte count in its appropriate binary unit; None stays None."""
    if n is None:
        return None
    return str(AdjustedByte.from_bytes(n))