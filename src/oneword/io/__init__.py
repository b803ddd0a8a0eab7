"""Extension based registry for reading documents as text.

``.pdf`` and ``.txt`` readers are registered by default.  The registry
dispatches on the file extension and performs no content normalization; word
splitting happens later in :mod:`oneword.text`.

``UnsupportedFormatError`` is raised when attempting to read a file whose
extension has no registered handler.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .readers.pdf_reader import read_pdf
from .readers.txt_reader import read_text

_READERS: dict[str, Callable[..., str]] = {}


def register_reader(ext: str, func: Callable[..., str]) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".pdf"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns a string.
    """

    _READERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def supported_extensions() -> tuple[str, ...]:
    """Return the registered extensions in sorted order."""

    return tuple(sorted(_READERS))


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Read ``path`` using the registered reader for its extension.

    Parameters
    ----------
    path:
        Path to the file being read.
    **kwargs:
        Additional keyword arguments forwarded to the underlying reader.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    FileNotFoundError
        If ``path`` does not exist.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    if not Path(path).is_file():
        raise FileNotFoundError(f"No such file: {path}")
    return reader(path, **kwargs)


register_reader(".pdf", read_pdf)
register_reader(".txt", read_text)

__all__ = [
    "register_reader",
    "get_extension",
    "supported_extensions",
    "read_file",
]
