"""JSON file backed book library.

The whole library is a single JSON array of :class:`~oneword.library.models.Book`
objects.  Every :meth:`Library.save` rewrites the file: the data is written to
a temporary sibling first and then moved into place with :func:`os.replace`, so
a crash while saving leaves the previous file intact.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterator
from pathlib import Path
from uuid import UUID

from pydantic import ValidationError

from ..utils.errors import AmbiguousBookError, BookNotFoundError, LibraryFormatError
from ..utils.logging import get_logger
from .models import Book

logger = get_logger(__name__)


class Library:
    """In-memory list of books mirrored to a JSON file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.books: list[Book] = []

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> "Library":
        """Replace the in-memory books with the file contents.

        A missing file is an empty library.  Raises :class:`LibraryFormatError`
        when the file is not a JSON array of valid books.
        """

        if not self.path.exists():
            self.books = []
            return self
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise LibraryFormatError(f"Cannot decode library {self.path}: {exc}") from exc
        if not isinstance(raw, list):
            raise LibraryFormatError(f"Library {self.path} must contain a JSON array")
        try:
            self.books = [Book.model_validate(item) for item in raw]
        except ValidationError as exc:
            first = str(exc).splitlines()[0]
            raise LibraryFormatError(f"Invalid book in {self.path}: {first}") from exc
        logger.debug("Loaded %d books from %s", len(self.books), self.path)
        return self

    def save(self) -> None:
        """Write all books to :attr:`path` atomically."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [book.model_dump(mode="json") for book in self.books]
        fd, tmp_name = tempfile.mkstemp(
            prefix=self.path.name + ".", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, book: Book) -> Book:
        self.books.append(book)
        return book

    def update(self, book: Book) -> bool:
        """Replace the stored book that has ``book.id``.

        Returns ``False`` and leaves the library untouched when no book with
        that id exists.
        """

        for idx, existing in enumerate(self.books):
            if existing.id == book.id:
                self.books[idx] = book
                return True
        return False

    def remove(self, book_id: UUID) -> Book:
        for idx, existing in enumerate(self.books):
            if existing.id == book_id:
                return self.books.pop(idx)
        raise BookNotFoundError(f"No book with id {book_id}")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, book_id: UUID) -> Book | None:
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def find(self, ref: str) -> Book:
        """Resolve ``ref`` to a single book.

        ``ref`` may be a full id, a unique id prefix, or a title (compared
        case-insensitively).  An exact id or title wins over prefixes.
        """

        needle = ref.strip()
        lowered = needle.lower()
        exact = [
            b for b in self.books if str(b.id) == lowered or b.title.lower() == lowered
        ]
        if len(exact) == 1:
            return exact[0]
        if len(exact) > 1:
            raise AmbiguousBookError(f"'{needle}' matches {len(exact)} books")

        by_prefix = [b for b in self.books if lowered and str(b.id).startswith(lowered)]
        if len(by_prefix) == 1:
            return by_prefix[0]
        if len(by_prefix) > 1:
            raise AmbiguousBookError(f"Id prefix '{needle}' matches {len(by_prefix)} books")
        raise BookNotFoundError(f"No book matches '{needle}'")

    def __len__(self) -> int:
        return len(self.books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)


__all__ = ["Library"]
