"""Information about the build: target, profile, time, git commit and compiler."""

from __future__ import annotations

import os
import subprocess
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

MIN_SHORT_COMMIT_ID_LEN = 7
BITS_PER_CHAR = 4
# Git uses SHA-1 today but is moving to SHA-256.
POSSIBLE_FULL_COMMIT_ID_LEN = 256 // BITS_PER_CHAR

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_valid_id(commit_id: str) -> bool:
    """Return True if ``commit_id`` looks like a short or full git commit hash."""
    return MIN_SHORT_COMMIT_ID_LEN <= len(commit_id) <= POSSIBLE_FULL_COMMIT_ID_LEN and all(
        c in _HEX_DIGITS for c in commit_id
    )


@dataclass(frozen=True)
class GitSha:
    """A git commit id."""

    value: str

    @classmethod
    def parse(cls, text: str) -> GitSha:
        """Parse a commit id; raise ValueError if it is not a valid one."""
        if not is_valid_id(text):
            raise ValueError(f"invalid git commit id: {text!r}")
        return cls(text)

    def shorten(self, max_length: int) -> str:
        """Return at most the first ``max_length`` characters of the id."""
        return self.value[:max_length]

    @classmethod
    def from_cmd(cls) -> GitSha | None:
        """Read the current commit id with ``git rev-parse HEAD``; None on any failure."""
        try:
            output = subprocess.run(
                ["git", "rev-parse", "HEAD"], capture_output=True, check=False
            )
        except OSError:
            return None
        try:
            stdout = output.stdout.decode("utf-8")
        except UnicodeDecodeError:
            return None
        stdout = stdout[: len(stdout.strip())]
        return cls(stdout) if is_valid_id(stdout) else None

    def __str__(self) -> str:
        return self.value


def _get_rustc_version() -> str:
    rustc = os.environ.get("RUSTC", "rustc")
    try:
        output = subprocess.run([rustc, "--version"], capture_output=True, check=False)
    except OSError as err:
        raise RuntimeError(f"get rustc version: {err}") from err
    if output.returncode != 0:
        raise RuntimeError("Failed to get rustc version")
    try:
        return output.stdout.decode("utf-8").strip()
    except UnicodeDecodeError as err:
        raise RuntimeError("version output to utf8") from err


@dataclass(frozen=True)
class BuildInfo:
    """Facts gathered while building."""

    build_profile: str
    build_target: str
    epoch_seconds: int
    git_sha: GitSha | None
    rustc_version: str

    @classmethod
    def from_build_script(cls) -> BuildInfo:
        """Collect build information from the environment of a build script.

        Raises KeyError when TARGET or PROFILE is unset and RuntimeError when the
        compiler version cannot be read.
        """
        build_target = os.environ["TARGET"]
        build_profile = os.environ["PROFILE"]
        epoch_seconds = int(time.time())
        git_sha = GitSha.from_cmd()
        rustc_version = _get_rustc_version()
        return cls(
            build_profile=build_profile,
            build_target=build_target,
            epoch_seconds=epoch_seconds,
            git_sha=git_sha,
            rustc_version=rustc_version,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "build_profile": self.build_profile,
            "build_target": self.build_target,
            "epoch_seconds": self.epoch_seconds,
            "git_sha": None if self.git_sha is None else self.git_sha.value,
            "rustc_version": self.rustc_version,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BuildInfo:
        """Build from a mapping as produced by :meth:`to_dict`."""
        epoch_seconds = data["epoch_seconds"]
        if isinstance(epoch_seconds, bool) or not isinstance(epoch_seconds, int) or epoch_seconds < 0:
            raise ValueError(f"invalid epoch_seconds: {epoch_seconds!r}")
        strings = {}
        for name in ("build_profile", "build_target", "rustc_version"):
            value = data[name]
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string")
            strings[name] = value
        sha = data.get("git_sha")
        if sha is not None and not isinstance(sha, str):
            raise TypeError("git_sha must be a string or None")
        return cls(
            epoch_seconds=epoch_seconds,
            git_sha=None if sha is None else GitSha(sha),
            **strings,
        )