# tests/test_queries.py

from __future__ import annotations

from datetime import date

from taskshelf.core import query
from taskshelf.library import library_queries
from taskshelf.library.library_models import LibraryItem, ReadStatus
from taskshelf.tasks import task_queries
from taskshelf.tasks.task_models import Completion, Priority, Task


def _book(id: int, genre: str, year: int = 2000, author: str = "Anon", read=ReadStatus.UNREAD):
    return LibraryItem(
        id=id, title=f"book{id}", author=author, genre=genre, publication_year=year, is_read=read
    )


def _task(id: int, due: date | None, priority=Priority.MEDIUM, done=Completion.PENDING) -> Task:
    return Task(id=id, title=f"t{id}", due_date=due, priority=priority, is_completed=done)


# ---- generic helpers ----


def test_filter_text_is_case_insensitive_and_blank_passes_through() -> None:
    books = [_book(1, "Sci-Fi"), _book(2, "sci-fi"), _book(3, "Drama")]
    assert [b.id for b in query.filter_text(books, "genre", "SCI-FI")] == [1, 2]
    assert query.filter_text(books, "genre", "") == books
    assert query.filter_text(books, "genre", None) == books
    assert query.filter_text(books, "genre", "Horror") == []


def test_filter_range_bounds_are_inclusive_and_optional() -> None:
    books = [_book(1, "g", 1990), _book(2, "g", 2000), _book(3, "g", 2010)]
    assert [b.id for b in query.filter_range(books, "publication_year", 2000, 2010)] == [2, 3]
    assert [b.id for b in query.filter_range(books, "publication_year", None, 2000)] == [1, 2]
    assert [b.id for b in query.filter_range(books, "publication_year", 2001, None)] == [3]
    assert query.filter_range(books, "publication_year") == books


def test_filter_range_drops_missing_values_only_when_bounded() -> None:
    tasks = [_task(1, None), _task(2, date(2024, 1, 5))]
    assert query.filter_range(tasks, "due_date") == tasks
    assert [t.id for t in query.filter_range(tasks, "due_date", date(2024, 1, 1))] == [2]


def test_helpers_do_not_mutate_input() -> None:
    tasks = [_task(2, None), _task(1, date(2024, 1, 1))]
    snapshot = list(tasks)
    query.order_by(tasks, "due_date", then_desc="priority")
    query.filter_choice(tasks, "priority", Priority.HIGH)
    assert tasks == snapshot


def test_count_by_orders_by_descending_ordinal() -> None:
    tasks = [
        _task(1, None, Priority.LOW),
        _task(2, None, Priority.HIGH),
        _task(3, None, Priority.LOW),
    ]
    assert query.count_by(tasks, "priority") == [(Priority.HIGH, 1), (Priority.LOW, 2)]
    assert query.count_by([], "priority") == []


def test_most_common_tie_goes_to_first_seen() -> None:
    books = [_book(1, "Drama"), _book(2, "Poetry"), _book(3, "Poetry"), _book(4, "Drama")]
    assert query.most_common(books, "genre") == ("Drama", 2)
    assert query.most_common([], "genre") is None


# ---- tasks ----


def test_task_default_order_due_date_then_priority_desc() -> None:
    tasks = [
        _task(1, None, Priority.HIGH),
        _task(2, date(2024, 2, 1), Priority.LOW),
        _task(3, date(2024, 1, 1), Priority.LOW),
        _task(4, date(2024, 2, 1), Priority.HIGH),
        _task(5, None, Priority.LOW),
    ]
    assert [t.id for t in task_queries.default_order(tasks)] == [3, 4, 2, 1, 5]


def test_task_filters() -> None:
    tasks = [
        _task(1, date(2024, 1, 3), Priority.HIGH, Completion.COMPLETED),
        _task(2, date(2024, 1, 20), Priority.LOW, Completion.PENDING),
        _task(3, None, Priority.HIGH, Completion.PENDING),
    ]
    assert [t.id for t in task_queries.by_completion(tasks, Completion.PENDING)] == [2, 3]
    assert [t.id for t in task_queries.by_priority(tasks, Priority.HIGH)] == [1, 3]
    assert [t.id for t in task_queries.due_between(tasks, date(2024, 1, 3), date(2024, 1, 3))] == [1]
    assert [t.id for t in task_queries.due_this_week(tasks, today=date(2024, 1, 1))] == [1]
    assert [t.id for t in task_queries.due_this_week(tasks, today=date(2024, 1, 13))] == [2]


def test_task_summary() -> None:
    tasks = [
        _task(1, None, Priority.HIGH, Completion.COMPLETED),
        _task(2, None, Priority.MEDIUM, Completion.PENDING),
        _task(3, None, Priority.HIGH, Completion.PENDING),
    ]
    summary = task_queries.summarize(tasks)
    assert summary.total == 3
    assert summary.by_priority == [(Priority.HIGH, 2), (Priority.MEDIUM, 1)]
    assert summary.by_completion == [(Completion.PENDING, 2), (Completion.COMPLETED, 1)]


# ---- library ----


def test_library_most_common_genre() -> None:
    books = [_book(1, "Sci-Fi"), _book(2, "Sci-Fi"), _book(3, "Drama")]
    summary = library_queries.summarize(books)
    assert summary.most_common_genre == ("Sci-Fi", 2)
    assert summary.total == 3
    assert summary.by_read_status == [(ReadStatus.UNREAD, 3)]


def test_library_search() -> None:
    books = [
        _book(3, "Drama", 1999, "Austen", ReadStatus.READ),
        _book(1, "Sci-Fi", 1965, "Herbert"),
        _book(2, "Sci-Fi", 2011, "herbert"),
    ]
    assert [b.id for b in library_queries.default_order(books)] == [1, 2, 3]
    assert [b.id for b in library_queries.by_author(books, "HERBERT")] == [1, 2]
    assert [b.id for b in library_queries.by_genre(books, "")] == [1, 2, 3]
    assert [b.id for b in library_queries.by_read_status(books, ReadStatus.READ)] == [3]
    assert [b.id for b in library_queries.published_between(books, 1990, None)] == [2, 3]
