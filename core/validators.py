"""Common validation helpers used across models."""
from __future__ import annotations

from typing import Any


def required_text(value: Any) -> bool:
    """Return True when ``value`` is a non-empty string.

    Whitespace is kept as-is: only missing and empty values are rejected.
    """
    return isinstance(value, str) and value != ""


def as_flag(value: Any) -> bool:
    """Coerce an optional flag to a boolean; missing or falsy values become False."""
    return bool(value)


__all__ = ["required_text", "as_flag"]
