# tests/test_models.py

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from taskshelf.library.library_models import LibraryItem, ReadStatus
from taskshelf.tasks.task_models import Completion, Priority, Task


def test_choice_ordinals_follow_declaration_order() -> None:
    assert [p.ordinal for p in Priority] == [1, 2, 3]
    assert Completion.COMPLETED.ordinal == 1
    assert ReadStatus.UNREAD.ordinal == 2


@pytest.mark.parametrize(
    "text, expected",
    [("3", Priority.HIGH), ("high", Priority.HIGH), (" Low ", Priority.LOW), ("4", None), ("", None), ("urgent", None)],
)
def test_choice_parse(text: str, expected: Priority | None) -> None:
    assert Priority.parse(text) is expected


def test_choice_from_json_rejects_unknown_values() -> None:
    assert ReadStatus.from_json("Read") is ReadStatus.READ
    with pytest.raises(ValueError):
        ReadStatus.from_json("skimmed")
    with pytest.raises(ValueError):
        ReadStatus.from_json(1)


def test_task_json_mapping() -> None:
    ts = datetime(2024, 6, 1, 8, 30, tzinfo=timezone.utc)
    task = Task(
        id=5,
        title="dentist",
        description="bring card",
        due_date=date(2024, 6, 10),
        priority=Priority.LOW,
        is_completed=Completion.COMPLETED,
        created_at=ts,
        updated_at=ts,
    )
    data = task.to_json()
    assert data == {
        "id": 5,
        "title": "dentist",
        "description": "bring card",
        "dueDate": "2024-06-10",
        "priority": "low",
        "isCompleted": "completed",
        "createdAt": "2024-06-01T08:30:00+00:00",
        "updatedAt": "2024-06-01T08:30:00+00:00",
    }
    assert Task.from_json(data) == task


def test_naive_timestamps_are_read_as_utc() -> None:
    item = LibraryItem.from_json(
        {
            "id": 1,
            "title": "Dune",
            "author": "Herbert",
            "genre": "Sci-Fi",
            "publicationYear": 1965,
            "isRead": "unread",
            "createdAt": "2024-01-01T10:00:00",
            "updatedAt": "2024-01-02T10:00:00",
        }
    )
    assert item.created_at == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    assert item.updated_at.tzinfo is not None


def test_str_rendering() -> None:
    task = Task(id=2, title="call mom", priority=Priority.HIGH)
    assert str(task) == "[2] [ ] call mom (High) - Due: (no due date)"

    book = LibraryItem(id=4, title="Emma", author="Austen", genre="Drama", publication_year=1815)
    assert str(book) == "[4] Emma by Austen (Drama, 1815) - Unread"


def _dune(**overrides) -> dict:
    data = {
        "id": 1,
        "title": "Dune",
        "author": "Herbert",
        "genre": "Sci-Fi",
        "publicationYear": 1965,
        "isRead": "unread",
        "createdAt": "2024-01-01T10:00:00+00:00",
    }
    data.update(overrides)
    return data


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": 1.9},
        {"id": True},
        {"id": "1"},
        {"publicationYear": "1965"},
        {"publicationYear": 1965.0},
        {"publicationYear": False},
    ],
)
def test_integer_fields_must_be_json_integers(overrides: dict) -> None:
    with pytest.raises(ValueError):
        LibraryItem.from_json(_dune(**overrides))


def test_task_id_must_be_json_integer() -> None:
    with pytest.raises(ValueError):
        Task.from_json({"id": 2.5, "title": "x", "createdAt": "2024-01-01T00:00:00+00:00"})
    assert Task.from_json({"id": 2, "title": "x", "createdAt": "2024-01-01T00:00:00+00:00"}).id == 2
