# src/taskshelf/library/library_queries.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..core import query
from .library_models import LibraryItem, ReadStatus


@dataclass(slots=True, frozen=True)
class LibrarySummary:
    total: int
    by_read_status: list[tuple[ReadStatus, int]]
    most_common_genre: tuple[str, int] | None


def default_order(items: Iterable[LibraryItem]) -> list[LibraryItem]:
    return query.order_by(items, "id", then_desc="publication_year")


def by_genre(items: Iterable[LibraryItem], genre: str | None) -> list[LibraryItem]:
    return query.filter_text(default_order(items), "genre", genre)


def by_author(items: Iterable[LibraryItem], author: str | None) -> list[LibraryItem]:
    return query.filter_text(default_order(items), "author", author)


def by_read_status(items: Iterable[LibraryItem], status: ReadStatus | None) -> list[LibraryItem]:
    return query.filter_choice(default_order(items), "is_read", status)


def published_between(
    items: Iterable[LibraryItem], start_year: int | None, end_year: int | None
) -> list[LibraryItem]:
    return query.filter_range(default_order(items), "publication_year", start_year, end_year)


def summarize(items: Iterable[LibraryItem]) -> LibrarySummary:
    books = list(items)
    return LibrarySummary(
        total=len(books),
        by_read_status=query.count_by(books, "is_read"),  # type: ignore[arg-type]
        most_common_genre=query.most_common(books, "genre"),
    )
