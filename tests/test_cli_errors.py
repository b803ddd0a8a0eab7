from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from oneword.cli import app


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.pdf"
    runner = CliRunner()
    result = runner.invoke(app, ["import", str(missing)])
    assert result.exit_code == 3
    assert "missing.pdf" in result.output


def test_unsupported_extension(tmp_path: Path) -> None:
    in_path = tmp_path / "foo.bin"
    in_path.write_text("data", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["import", str(in_path)])
    assert result.exit_code == 3
    assert ".pdf" in result.output


def test_corrupt_pdf(tmp_path: Path) -> None:
    in_path = tmp_path / "broken.pdf"
    in_path.write_bytes(b"garbage")
    runner = CliRunner()
    result = runner.invoke(app, ["import", str(in_path)])
    assert result.exit_code == 3


def test_undecodable_text_file(tmp_path: Path) -> None:
    in_path = tmp_path / "latin.txt"
    in_path.write_bytes("café crème".encode("latin-1"))
    runner = CliRunner()
    result = runner.invoke(app, ["import", str(in_path)])
    assert result.exit_code == 3
    assert "latin.txt" in result.output


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["--config", str(bad_cfg), "list"])
    assert result.exit_code == 4


def test_corrupt_library(tmp_path: Path) -> None:
    library = tmp_path / "broken.json"
    library.write_text("not json", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["--library", str(library), "list"])
    assert result.exit_code == 5


def test_unknown_book() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show", "nothing-here"])
    assert result.exit_code == 5
    assert "nothing-here" in result.output


def test_read_empty_book(tmp_path: Path) -> None:
    blank = tmp_path / "empty.txt"
    blank.write_text("   \n", encoding="utf-8")
    runner = CliRunner()
    assert runner.invoke(app, ["import", str(blank)]).exit_code == 0
    result = runner.invoke(app, ["read", "empty"])
    assert result.exit_code == 6
