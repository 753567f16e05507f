# src/taskshelf/core/fields.py

from __future__ import annotations


def int_from_json(raw: object, field: str) -> int:
    """Accept a JSON integer only. Floats, booleans and numeric strings are rejected."""
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{field} must be an integer, got {raw!r}")
    return raw
