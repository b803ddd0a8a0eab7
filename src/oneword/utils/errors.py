"""Typed exceptions for document I/O and the book library."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader is registered for a file format."""


class ExtractionError(IOFormatError):
    """Raised when a document exists but its text cannot be extracted."""


class LibraryError(Exception):
    """Base class for library persistence and lookup errors."""


class LibraryFormatError(LibraryError):
    """Raised when the library file cannot be decoded."""


class BookNotFoundError(LibraryError, LookupError):
    """Raised when no book matches a reference."""


class AmbiguousBookError(LibraryError, LookupError):
    """Raised when a reference matches more than one book."""
