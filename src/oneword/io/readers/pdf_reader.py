"""PDF document reader.

Pages are visited in order and each page's text is followed by a single space
so that the last word of one page never fuses with the first word of the next.
Pages without a text layer contribute an empty string; scanned PDFs therefore
yield no words (OCR is not included).
"""

from __future__ import annotations

import os

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ...utils.errors import ExtractionError
from ...utils.logging import get_logger

PathLikeStr = os.PathLike[str]

logger = get_logger(__name__)


def read_pdf_pages(path: str | PathLikeStr) -> list[str]:
    """Return the extracted text of every page of ``path``."""

    try:
        reader = PdfReader(os.fspath(path))
        pages = [page.extract_text() or "" for page in reader.pages]
    except PdfReadError as exc:
        raise ExtractionError(f"Failed to load PDF {path}: {exc}") from exc
    logger.debug("Extracted %d pages from %s", len(pages), path)
    return pages


def read_pdf(path: str | PathLikeStr) -> str:
    """Return the text of ``path`` with each page followed by a space."""

    return "".join(page + " " for page in read_pdf_pages(path))


__all__ = ["read_pdf", "read_pdf_pages"]
