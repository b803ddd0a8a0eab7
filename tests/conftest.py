"""Shared fixtures: isolated library location and a tiny PDF builder."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from oneword.config import ConfigModel, load_config

PdfFactory = Callable[..., Path]


def _pdf_bytes(pages: list[str]) -> bytes:
    """Build a minimal PDF with one line of Helvetica text per page."""

    objects: list[bytes] = []
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    objects.append(b"<< /Type /Catalog /Pages 2 0 R >>")
    objects.append(f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode())
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")
    for pid, text in zip(page_ids, pages, strict=True):
        content = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode() if text else b""
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {pid + 1} 0 R >>"
            ).encode()
        )
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % num + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += b"%010d 00000 n \n" % off
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_at
    return bytes(out)


@pytest.fixture(autouse=True)
def isolated_library(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default library at a temporary file for every test."""

    path = tmp_path / "library.json"
    monkeypatch.setenv("ONEWORD_LIBRARY", str(path))
    return path


@pytest.fixture
def cfg() -> ConfigModel:
    return load_config(env={})


@pytest.fixture
def make_pdf(tmp_path: Path) -> PdfFactory:
    """Return ``make(name, pages)`` writing a PDF with the given page texts."""

    def make(name: str, pages: list[str]) -> Path:
        path = tmp_path / name
        path.write_bytes(_pdf_bytes(pages))
        return path

    return make
