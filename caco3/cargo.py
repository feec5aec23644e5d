"""Discovery of Cargo workspace directories."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

CARGO_CONFIG_FILE = "Cargo.toml"


class DiscoverWorkspaceError(Exception):
    """Raised when workspace discovery fails."""


class WorkspaceNotFoundError(DiscoverWorkspaceError):
    """Raised when no workspace directory exists at or above the path."""

    def __init__(self) -> None:
        super().__init__("not found workspace directory")


def _is_workspace_config(text: str) -> bool:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        return False
    workspace = data.get("workspace")
    if not isinstance(workspace, dict):
        return False
    members = workspace.get("members")
    return isinstance(members, list) and all(isinstance(m, str) for m in members)


def discover_workspace(path: str | os.PathLike[str]) -> Path:
    """Find the nearest directory at or above ``path`` whose Cargo.toml declares a workspace."""
    directory = Path(path)
    while True:
        config = directory / CARGO_CONFIG_FILE
        if config.exists():
            try:
                text = config.read_text(encoding="utf-8")
            except OSError as err:
                raise DiscoverWorkspaceError(f"io error: {err}") from err
            if _is_workspace_config(text):
                return directory
        parent = directory.parent
        if parent == directory:
            raise WorkspaceNotFoundError()
        directory = parent