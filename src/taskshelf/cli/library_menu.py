# src/taskshelf/cli/library_menu.py

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.state import AppState
from ..library import library_queries
from ..library.library_models import LibraryItem, ReadStatus
from .commands import MenuRegistry
from .prompts import InputCollector

logger = logging.getLogger(__name__)

menu = MenuRegistry("Library (JSON-backed)")


def render_books(books: Sequence[LibraryItem]) -> str:
    if not books:
        return "-- Books (0) --\n(no books)"
    return "\n".join([f"-- Books ({len(books)}) --", *(str(b) for b in books)])


async def cmd_add(state: AppState, io: InputCollector) -> str:
    io.say("-- Add Book --")
    book = LibraryItem(
        title=io.prompt_required("Title: "),
        author=io.prompt_required("Author: "),
        genre=io.prompt_required("Genre: "),
        publication_year=io.prompt_year("Publication Year: "),
        is_read=io.prompt_choice(ReadStatus, "read status"),
    )
    added = await state.library.add(book)
    return f"Book added with ID {added.id}."


async def cmd_update(state: AppState, io: InputCollector) -> str:
    io.say("-- Update Book --")
    book_id = io.prompt_int("Enter book ID to update: ")
    existing = await state.library.get_by_id(book_id)
    if existing is None:
        return "Book not found."

    io.say(f"Current:\n{existing}\n")
    io.say("Leave empty to keep current value.")

    title = io.prompt_nullable("New Title: ")
    author = io.prompt_nullable("New Author: ")
    genre = io.prompt_nullable("New Genre: ")
    year = io.prompt_year_nullable("New Publication Year: ")
    status = io.prompt_choice_nullable(ReadStatus, "read status", existing.is_read)

    if title is not None:
        existing.title = title
    if author is not None:
        existing.author = author
    if genre is not None:
        existing.genre = genre
    if year is not None:
        existing.publication_year = year
    if status is not None:
        existing.is_read = status

    ok = await state.library.update(existing)
    return "Book updated." if ok else "Failed to update (book no longer exists)."


async def cmd_delete(state: AppState, io: InputCollector) -> str:
    io.say("-- Remove Book --")
    book_id = io.prompt_int("Enter book ID to delete: ")
    existing = await state.library.get_by_id(book_id)
    if existing is None:
        return "Book not found."

    io.say(f"About to delete:\n{existing}\n")
    if not io.confirm("DELETE"):
        return "Cancelled."
    ok = await state.library.delete(book_id)
    return "Deleted." if ok else "Failed to delete (book no longer exists)."


async def cmd_search(state: AppState, io: InputCollector) -> str:
    io.say("--- Search For Books ---")
    io.say("1) By Genre\n2) By Author\n3) By Read Status\n4) By Publication Year")
    choice = io.prompt("Choice: ")

    books = await state.library.load()

    if choice == "1":
        result = library_queries.by_genre(books, io.prompt("Genre (empty = all): "))
    elif choice == "2":
        result = library_queries.by_author(books, io.prompt("Author (empty = all): "))
    elif choice == "3":
        result = library_queries.by_read_status(books, io.prompt_choice(ReadStatus, "read status"))
    elif choice == "4":
        start = io.prompt_year_nullable("From year or leave empty: ")
        end = io.prompt_year_nullable("To year or leave empty: ")
        result = library_queries.published_between(books, start, end)
    else:
        return "Invalid choice."

    logger.debug("Book search choice=%s matched=%d of %d", choice, len(result), len(books))
    return render_books(result)


async def cmd_summary(state: AppState, io: InputCollector) -> str:
    summary = library_queries.summarize(await state.library.load())
    lines = ["-- Summary --", f"Total number of books: {summary.total}"]
    for status, count in summary.by_read_status:
        lines.append(f"{count} {status.label}")
    if summary.most_common_genre is not None:
        genre, count = summary.most_common_genre
        lines.append(f"Most common genre: {genre} ({count})")
    else:
        lines.append("Most common genre: (none)")
    return "\n".join(lines)


menu.register("1", cmd_add, "Add Book", aliases=["add"])
menu.register("2", cmd_update, "Update Book", aliases=["update"])
menu.register("3", cmd_delete, "Remove (Delete) Book", aliases=["delete"])
menu.register("4", cmd_search, "Search Books", aliases=["search"])
menu.register("5", cmd_summary, "Summary", aliases=["summary"])
