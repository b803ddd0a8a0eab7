from __future__ import annotations

from datetime import datetime, timedelta, timezone

from oneword.library import Book, SortOption, search, sort_books

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _books() -> list[Book]:
    return [
        Book(title="banana", words=["a"] * 10, current_word_index=5, date_added=T0),
        Book(
            title="Apple",
            words=["a"] * 10,
            current_word_index=1,
            date_added=T0 + timedelta(days=2),
        ),
        Book(title="cherry", words=[], date_added=T0 + timedelta(days=1)),
    ]


def test_search_case_insensitive() -> None:
    assert [b.title for b in search(_books(), "APP")] == ["Apple"]
    assert [b.title for b in search(_books(), "an")] == ["banana"]
    assert search(_books(), "zzz") == []


def test_empty_search_returns_all() -> None:
    assert len(search(_books(), "")) == 3


def test_sort_by_date_newest_first() -> None:
    ordered = sort_books(_books(), SortOption.DATE_ADDED)
    assert [b.title for b in ordered] == ["Apple", "cherry", "banana"]


def test_sort_by_title() -> None:
    ordered = sort_books(_books(), SortOption.TITLE)
    assert [b.title for b in ordered] == ["Apple", "banana", "cherry"]


def test_sort_by_progress_empty_book_last() -> None:
    ordered = sort_books(_books(), SortOption.PROGRESS)
    assert [b.title for b in ordered] == ["banana", "Apple", "cherry"]


def test_sort_option_values() -> None:
    assert SortOption("date") is SortOption.DATE_ADDED
    assert SortOption("progress") is SortOption.PROGRESS
