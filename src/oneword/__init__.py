"""oneword: speed-read documents one word at a time.

Documents are imported into a JSON-backed library as word sequences
(:mod:`oneword.importer`), optionally split into two parallel streams for
bilingual texts (:mod:`oneword.text.bilingual`), and played back at a fixed
words-per-minute pace (:mod:`oneword.playback`).  The command line interface
lives in :mod:`oneword.cli`.
"""

from .importer import build_book, import_document
from .library import Book, Library, SortOption
from .playback import ReadingSession

__all__ = [
    "Book",
    "Library",
    "ReadingSession",
    "SortOption",
    "build_book",
    "import_document",
]

__version__ = "0.1.0"
