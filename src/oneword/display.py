"""Plain-text rendering of the reading view and library rows."""

from __future__ import annotations

from .library.models import Book

EMPTY_PROMPT = "Import a PDF to begin"


def render_word(book: Book | None) -> list[str]:
    """Return the lines shown for the current cursor position.

    Bilingual books show the primary word above the secondary one.
    """

    if book is None or not book.words:
        return [EMPTY_PROMPT]
    lines = [book.words[book.current_word_index]]
    if book.is_dual_language:
        secondary = book.current_secondary_word
        if secondary is not None:
            lines.append(secondary)
    return lines


def format_progress(book: Book) -> str:
    return f"{book.progress:.0f}%"


def format_position(book: Book) -> str:
    if not book.words:
        return "0/0"
    return f"{book.current_word_index + 1}/{len(book.words)}"


def format_book_row(book: Book) -> str:
    """One line summary used by ``oneword list``."""

    marker = " [dual]" if book.is_dual_language else ""
    return (
        f"{str(book.id)[:8]}  {book.title}{marker}  "
        f"{format_progress(book)}  {book.words_per_minute:.0f} wpm"
    )


__all__ = ["EMPTY_PROMPT", "format_book_row", "format_position", "format_progress", "render_word"]
