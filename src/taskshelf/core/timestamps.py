# src/taskshelf/core/timestamps.py

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ts_to_json(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def ts_from_json(raw: object) -> datetime:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC."""
    if not isinstance(raw, str):
        raise ValueError(f"Expected an ISO timestamp string, got {raw!r}")
    value = datetime.fromisoformat(raw)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def date_to_json(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def date_from_json(raw: object) -> date | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValueError(f"Expected a YYYY-MM-DD string or null, got {raw!r}")
    # Accept full timestamps as well; only the calendar date is kept.
    return datetime.fromisoformat(raw).date() if "T" in raw else date.fromisoformat(raw)
