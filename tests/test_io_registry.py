"""Tests for the extension-based reader registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from oneword.io import get_extension, read_file, register_reader, supported_extensions
from oneword.utils.errors import UnsupportedFormatError


def test_unknown_extension_raises(tmp_path: Path) -> None:
    path = tmp_path / "file.unknown"
    path.write_text("data", encoding="utf-8")
    with pytest.raises(UnsupportedFormatError):
        read_file(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.pdf")


def test_txt_via_registry(tmp_path: Path) -> None:
    path = tmp_path / "sample.txt"
    path.write_text("hello there", encoding="utf-8")
    assert read_file(path) == "hello there"


def test_extension_case_insensitive(tmp_path: Path) -> None:
    path = tmp_path / "SAMPLE.TXT"
    path.write_text("hi", encoding="utf-8")
    assert get_extension(path) == ".txt"
    assert read_file(path) == "hi"


def test_default_extensions() -> None:
    assert {".pdf", ".txt"} <= set(supported_extensions())


def test_register_custom_reader(tmp_path: Path) -> None:
    path = tmp_path / "notes.md"
    path.write_text("# ignored", encoding="utf-8")
    register_reader(".MD", lambda p: "custom text")
    assert read_file(path) == "custom text"
