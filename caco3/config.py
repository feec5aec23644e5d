"""Parsing of boolean-like configuration values."""

from __future__ import annotations

FALSY_VALUES: tuple[str, ...] = ("0", "false", "n", "no", "off")
TRUTHY_VALUES: tuple[str, ...] = ("1", "true", "y", "yes", "on")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(value: str) -> str:
    return value.translate(_ASCII_LOWER)


def is_falsy(value: str) -> bool:
    """Return True if ``value`` is one of the falsy words (ASCII case-insensitive)."""
    return _ascii_lower(value) in FALSY_VALUES


def is_truthy(value: str) -> bool:
    """Return True if ``value`` is one of the truthy words (ASCII case-insensitive)."""
    return _ascii_lower(value) in TRUTHY_VALUES


def _expected_choices() -> str:
    choices = ", ".join(f'"{v}"' for v in (*TRUTHY_VALUES, *FALSY_VALUES))
    return f"Any of [{choices}] (case-insensitive)"


def bool_from_choice(value: object) -> bool:
    """Convert a bool, the integers 0 or 1, or a truthy/falsy word to a bool.

    Raises ValueError for an unrecognised value and TypeError for other types.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return value != 0
        raise ValueError(f"invalid value: integer `{value}`, expected 0 or 1")
    if isinstance(value, str):
        if is_truthy(value):
            return True
        if is_falsy(value):
            return False
        raise ValueError(
            f'invalid value: string "{value}", expected {_expected_choices()}'
        )
    raise TypeError(
        f"invalid type: {type(value).__name__}, expected a boolean"
    )