"""A nested configuration tree with dotted key lookups and removal."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any


class RemoveExistingKeyError(LookupError):
    """Raised when a key to remove does not exist."""

    def __init__(self, key: str) -> None:
        super().__init__(f"key {key} not found")
        self.key = key


class ConfigTree:
    """Nested configuration values addressed by dot separated keys."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(dict(data or {}))

    def has_key(self, key: str) -> bool:
        """Return True if a value exists at ``key``; a blank key is never present."""
        if not key:
            return False
        target: Any = self._data
        for part in key.split("."):
            if not isinstance(target, Mapping) or part not in target:
                return False
            target = target[part]
        return True

    def remove_existing_keys(self, keys: Iterable[str]) -> ConfigTree:
        """Return a new tree without ``keys``; raise RemoveExistingKeyError if one is missing."""
        value = copy.deepcopy(self._data)
        for key in keys:
            if not self.has_key(key):
                raise RemoveExistingKeyError(key)
            *components, field = key.split(".")
            parent: Any = value
            for component in components:
                parent = parent.get(component) if isinstance(parent, dict) else None
            if isinstance(parent, dict):
                parent.pop(field, None)
        return ConfigTree(value)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)