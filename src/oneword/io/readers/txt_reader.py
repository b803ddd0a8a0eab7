"""Plain-text reader.

:func:`read_text` loads a text file without any content normalization.  A
UTF-8 byte-order mark is consumed transparently through the ``"utf-8-sig"``
codec.  Undecodable content raises
:class:`~oneword.utils.errors.ExtractionError`; ``FileNotFoundError`` and other
I/O errors propagate to the caller.
"""

from __future__ import annotations

import os

from ...utils.errors import ExtractionError

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text file as-is.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.  Defaults to ``"utf-8-sig"`` so that a UTF-8 BOM
        is consumed when present.
    errors:
        Error handling strategy passed to :func:`open`.
    """

    try:
        with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        raise ExtractionError(f"Cannot decode {path} as {encoding}: {exc}") from exc


__all__ = ["read_text"]
