"""Search and ordering of the book list."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .models import Book


class SortOption(Enum):
    """Orderings offered for the library listing."""

    DATE_ADDED = "date"
    TITLE = "title"
    PROGRESS = "progress"


def search(books: Iterable[Book], text: str) -> list[Book]:
    """Return books whose title contains ``text`` (case-insensitive)."""

    if not text:
        return list(books)
    needle = text.casefold()
    return [b for b in books if needle in b.title.casefold()]


def sort_books(books: Iterable[Book], option: SortOption) -> list[Book]:
    """Return ``books`` ordered by ``option``.

    Dates and progress sort descending (newest and furthest first); titles
    sort ascending ignoring case.
    """

    if option is SortOption.DATE_ADDED:
        return sorted(books, key=lambda b: b.date_added, reverse=True)
    if option is SortOption.TITLE:
        return sorted(books, key=lambda b: b.title.casefold())
    if option is SortOption.PROGRESS:
        return sorted(books, key=lambda b: b.progress, reverse=True)
    raise ValueError(f"Unknown sort option: {option!r}")


__all__ = ["SortOption", "search", "sort_books"]
