"""Untyped access to TOML configuration by dotted path."""

from __future__ import annotations

import datetime as _dt
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

PATH_SEP = "."


@dataclass(frozen=True)
class MetaConfig:
    """A parsed TOML value with lookups by dot separated path."""

    value: Any

    @classmethod
    def from_toml(cls, text: str) -> MetaConfig:
        """Parse TOML text into a MetaConfig."""
        return cls(tomllib.loads(text))

    def get(self, path: str) -> Any:
        """Return the value at ``path``; raise KeyError if any component is missing."""
        target = self.value
        for component in path.split(PATH_SEP):
            if not isinstance(target, Mapping) or component not in target:
                raise KeyError(f"index not found: {path!r}")
            target = target[component]
        return target

    def as_bool(self, path: str) -> bool | None:
        value = self.get(path)
        return value if isinstance(value, bool) else None

    def as_f64(self, path: str) -> float | None:
        value = self.get(path)
        return value if isinstance(value, float) else None

    def as_i64(self, path: str) -> int | None:
        value = self.get(path)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    def as_str(self, path: str) -> str | None:
        value = self.get(path)
        return value if isinstance(value, str) else None

    def to_offset_datetime(self, path: str) -> _dt.datetime | None:
        """Return the value as an offset-aware datetime, or None if it is not one."""
        value = self.get(path)
        if isinstance(value, _dt.datetime) and value.tzinfo is not None:
            return value
        return None

    def to_instance(self, path: str, factory: Callable[..., T]) -> T | None:
        """Build an instance from the value using ``factory``; None if that fails.

        Tables are passed as keyword arguments, other values as one argument.
        """
        value = self.get(path)
        try:
            if isinstance(value, Mapping):
                return factory(**value)
            return factory(value)
        except (TypeError, ValueError, KeyError):
            return None