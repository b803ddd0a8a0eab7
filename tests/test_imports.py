"""Smoke tests for package import and version."""

import oneword


def test_import_package() -> None:
    assert isinstance(oneword, object)


def test_version() -> None:
    assert oneword.__version__ == "0.1.0"


def test_public_api() -> None:
    for name in ("Book", "Library", "ReadingSession", "SortOption", "import_document"):
        assert hasattr(oneword, name)
