"""Import a document file into a :class:`~oneword.library.models.Book`.

The title is the file name without its extension.  A document is read in
dual-language mode when the caller asks for it, or, when the caller leaves the
choice open, when its title contains one of the configured keywords.  Dual mode
splits the text into parallel primary/secondary word streams; otherwise the
text is split into a single word sequence.
"""

from __future__ import annotations

import os
from pathlib import Path

from .config import ConfigModel
from .io import read_file
from .library.models import Book
from .text import is_dual_language_title, separate_languages, split_words
from .utils.logging import get_logger

logger = get_logger(__name__)


def title_for(path: str | os.PathLike[str]) -> str:
    """Return the book title derived from ``path``."""

    return Path(path).stem


def build_book(text: str, title: str, cfg: ConfigModel, *, dual: bool | None = None) -> Book:
    """Create a new book at position ``0`` from already extracted ``text``."""

    dl = cfg.dual_language
    if dual is None:
        dual = is_dual_language_title(title, dl.title_keywords)

    secondary: list[str] | None
    if dual:
        words, secondary = separate_languages(
            text,
            script_start=dl.script_start,
            script_end=dl.script_end,
            pad_token=dl.pad_token,
        )
    else:
        words, secondary = split_words(text), None

    if not words:
        logger.warning("No words extracted for '%s'", title)

    return Book(
        title=title,
        words=words,
        secondary_words=secondary,
        current_word_index=0,
        words_per_minute=cfg.reader.default_wpm,
    )


def import_document(
    path: str | os.PathLike[str],
    cfg: ConfigModel,
    *,
    dual: bool | None = None,
) -> Book:
    """Read ``path`` through the I/O registry and build a book from it.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    UnsupportedFormatError
        If no reader handles the file extension.
    ExtractionError
        If the document cannot be parsed.
    """

    text = read_file(path)
    book = build_book(text, title_for(path), cfg, dual=dual)
    logger.info(
        "Imported '%s': %d words%s",
        book.title,
        len(book.words),
        " (dual-language)" if book.is_dual_language else "",
    )
    return book


__all__ = ["build_book", "import_document", "title_for"]
