# src/taskshelf/core/query.py

"""
Pure query helpers over an in-memory snapshot of records.

Fields are addressed by attribute name. Every helper returns a new list and
never mutates its input, so results can be composed freely:

    result = filter_choice(order_by(tasks, "due_date", then_desc="priority"),
                           "priority", Priority.HIGH)
"""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import Iterable
from typing import Any, TypeVar

from .choices import Choice

T = TypeVar("T")


def _sort_value(value: Any) -> Any:
    return value.ordinal if isinstance(value, Choice) else value


def filter_text(records: Iterable[T], field: str, value: str | None) -> list[T]:
    """Case-insensitive equality. Empty or None `value` keeps everything."""
    items = list(records)
    if not value:
        return items
    needle = value.strip().casefold()
    get = operator.attrgetter(field)
    return [r for r in items if str(get(r) or "").strip().casefold() == needle]


def filter_choice(records: Iterable[T], field: str, value: Choice | None) -> list[T]:
    items = list(records)
    if value is None:
        return items
    get = operator.attrgetter(field)
    return [r for r in items if get(r) == value]


def filter_range(
    records: Iterable[T],
    field: str,
    lower: Any | None = None,
    upper: Any | None = None,
) -> list[T]:
    """
    Inclusive range on a number or date field. A None bound is open.

    With both bounds open the input passes through unchanged; otherwise
    records whose field is None are dropped.
    """
    items = list(records)
    if lower is None and upper is None:
        return items
    get = operator.attrgetter(field)
    out: list[T] = []
    for r in items:
        v = get(r)
        if v is None:
            continue
        if lower is not None and v < lower:
            continue
        if upper is not None and v > upper:
            continue
        out.append(r)
    return out


def order_by(records: Iterable[T], field: str, *, then_desc: str | None = None) -> list[T]:
    """Ascending on `field` (None last), ties broken by `then_desc` descending."""
    items = list(records)
    if then_desc is not None:
        get2 = operator.attrgetter(then_desc)
        items.sort(key=lambda r: _sort_value(get2(r)), reverse=True)
    get = operator.attrgetter(field)
    present = [r for r in items if get(r) is not None]
    missing = [r for r in items if get(r) is None]
    # Stable sort: the secondary order survives among equal primary keys.
    present.sort(key=lambda r: _sort_value(get(r)))
    return present + missing


def count_by(records: Iterable[T], field: str) -> list[tuple[Choice, int]]:
    """(value, count) per present enum value, ordered by descending ordinal."""
    counts: Counter[Choice] = Counter(operator.attrgetter(field)(r) for r in records)
    return sorted(counts.items(), key=lambda kv: kv[0].ordinal, reverse=True)


def most_common(records: Iterable[T], field: str) -> tuple[Any, int] | None:
    """
    Most frequent value of `field` and its count, or None for no records.

    Ties go to the value encountered first.
    """
    counts = Counter(operator.attrgetter(field)(r) for r in records)
    if not counts:
        return None
    return counts.most_common(1)[0]
