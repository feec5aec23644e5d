"""Paths that resolve relative to the configuration file that declared them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_PATH_KEY = "___figment_relative_path"
_METADATA_KEY = "___figment_relative_metadata_path"


@dataclass(frozen=True)
class RelativePath:
    """A path plus the configuration file it was declared in, if known."""

    path: Path
    metadata_path: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))
        if self.metadata_path is not None:
            object.__setattr__(self, "metadata_path", Path(self.metadata_path))

    def relative(self) -> Path:
        """Resolve the path against the declaring file's directory; absolute paths stay."""
        if self.metadata_path is None:
            return self.path
        return self.metadata_path.parent / self.path

    def serialize(self) -> dict[str, str]:
        """Return the human readable form ``{"path": ...}`` of the resolved path."""
        return {"path": str(self.relative())}

    @classmethod
    def deserialize(cls, data: Any) -> RelativePath:
        """Read the machine form, the readable ``{"path": ...}`` form, or a plain string."""
        if isinstance(data, str):
            return cls(Path(data))
        if isinstance(data, Mapping):
            if _PATH_KEY in data:
                metadata = data.get(_METADATA_KEY)
                return cls(Path(data[_PATH_KEY]), None if metadata is None else Path(metadata))
            if "path" in data:
                return cls(Path(data["path"]))
            raise ValueError("expected a relative path or a mapping with a 'path' field")
        raise TypeError(f"invalid type: {type(data).__name__}, expected a path")