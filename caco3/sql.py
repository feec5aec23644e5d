"""SQL text clean-up."""

from __future__ import annotations


def _keep_sql_line(line: str) -> bool:
    trimmed = line.strip()
    # C-style block comments are left alone.
    return bool(trimmed) and not trimmed.startswith("--")


def sql_trim(query: str) -> str:
    """Remove blank lines and ``--`` comment lines from ``query``."""
    lines = (line.removesuffix("\r") for line in query.split("\n"))
    return "\n".join(line for line in lines if _keep_sql_line(line))