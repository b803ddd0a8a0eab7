"""Typer-based command line interface for the reader.

``oneword import`` extracts the words of a PDF (or plain-text) document into the
library, ``oneword read`` plays a book back one word at a time and the remaining
commands inspect or adjust library entries.  Reading position and pace are
saved in the library after every change.

Exit codes
----------
0 success
3 I/O error (missing file, unsupported format, unreadable PDF)
4 configuration error
5 library error (corrupt library file, unknown or ambiguous book)
6 nothing to read (the book has no words)
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .display import format_book_row, format_position, format_progress, render_word
from .importer import import_document
from .io import supported_extensions
from .library import Library, SortOption, search, sort_books
from .library.models import Book
from .playback import ReadingSession, clamp_wpm
from .utils.errors import IOFormatError, LibraryError, UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

EXIT_IO = 3
EXIT_CONFIG = 4
EXIT_LIBRARY = 5
EXIT_EMPTY = 6

app = typer.Typer(
    name="oneword",
    help="Speed-read documents one word at a time. Start with 'oneword import'.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


@dataclass
class _State:
    config_path: Path | None = None
    library_path: Path | None = None
    verbose: bool = False


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _state(ctx: typer.Context) -> _State:
    if not isinstance(ctx.obj, _State):
        ctx.obj = _State()
    return ctx.obj


def _load(ctx: typer.Context) -> tuple[ConfigModel, Library]:
    """Load configuration and the library selected by the global options."""

    state = _state(ctx)
    try:
        cfg = load_config(state.config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(EXIT_CONFIG, str(exc).splitlines()[0])

    library_path = state.library_path or cfg.library.resolved_path
    try:
        library = Library(library_path).load()
    except LibraryError as exc:
        _safe_exit(EXIT_LIBRARY, str(exc))
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    if state.verbose:
        typer.echo(f"Library {library_path} ({len(library)} books)", err=True)
    return cfg, library


def _find(library: Library, ref: str) -> Book:
    try:
        return library.find(ref)
    except LibraryError as exc:
        _safe_exit(EXIT_LIBRARY, str(exc))


def _save(library: Library) -> None:
    try:
        library.save()
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))


def _echo_frame(book: Book) -> None:
    for line in render_word(book):
        typer.echo(line)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    library_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--library", help="Library JSON file (overrides config and environment)"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress and debug messages to stderr"
    ),
) -> None:
    """Entry point for the oneword command group."""

    configure_logging(verbose)
    ctx.obj = _State(config_path=config_path, library_path=library_path, verbose=verbose)


@app.command("import")
def import_cmd(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Document to import (.pdf or .txt)"),  # noqa: B008
    dual: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--dual/--single",
        help="Force bilingual word pairing on or off (default: decided by title)",
    ),
    wpm: Optional[float] = typer.Option(  # noqa: B008
        None, "--wpm", help="Initial words per minute"
    ),
) -> None:
    """Extract the words of PATH and add it to the library."""

    cfg, library = _load(ctx)
    try:
        book = import_document(path, cfg, dual=dual)
    except UnsupportedFormatError as exc:
        _safe_exit(EXIT_IO, f"{exc} (supported: {', '.join(supported_extensions())})")
    except (FileNotFoundError, IOFormatError, OSError) as exc:
        _safe_exit(EXIT_IO, str(exc))
    if wpm is not None:
        book.words_per_minute = clamp_wpm(wpm, cfg.reader)

    library.add(book)
    _save(library)

    kind = "dual-language " if book.is_dual_language else ""
    typer.echo(f"Imported {kind}'{book.title}' ({len(book.words)} words) as {book.id}")
    if not book.words:
        typer.echo("Warning: no text could be extracted from this document", err=True)


@app.command("list")
def list_cmd(
    ctx: typer.Context,
    query: str = typer.Option("", "--search", "-s", help="Filter titles (case-insensitive)"),
    sort: SortOption = typer.Option(  # noqa: B008
        SortOption.DATE_ADDED, "--sort", help="Order of the listing"
    ),
) -> None:
    """List books in the library."""

    _, library = _load(ctx)
    if not len(library):
        typer.echo("No books yet. Add one with 'oneword import'.")
        return
    books = sort_books(search(library, query), sort)
    if not books:
        typer.echo("No books found.")
        return
    for book in books:
        typer.echo(format_book_row(book))


@app.command()
def show(
    ctx: typer.Context,
    book_ref: str = typer.Argument(..., metavar="BOOK", help="Title, id or id prefix"),
) -> None:
    """Show the reading state of BOOK."""

    _, library = _load(ctx)
    book = _find(library, book_ref)
    typer.echo(f"Title:    {book.title}")
    typer.echo(f"Id:       {book.id}")
    typer.echo(f"Words:    {len(book.words)}")
    typer.echo(f"Position: {format_position(book)} ({format_progress(book)})")
    typer.echo(f"Pace:     {book.words_per_minute:.0f} wpm")
    typer.echo(f"Language: {'dual' if book.is_dual_language else 'single'}")
    typer.echo(f"Added:    {book.date_added.isoformat(timespec='seconds')}")
    if book.words:
        typer.echo("Current:  " + " / ".join(render_word(book)))


@app.command()
def read(
    ctx: typer.Context,
    book_ref: str = typer.Argument(..., metavar="BOOK", help="Title, id or id prefix"),
    wpm: Optional[float] = typer.Option(  # noqa: B008
        None, "--wpm", help="Change the pace before playing"
    ),
    restart: bool = typer.Option(  # noqa: B008
        False, "--restart", help="Start again from the first word"
    ),
    limit: Optional[int] = typer.Option(  # noqa: B008
        None, "--limit", min=1, help="Pause after advancing this many words"
    ),
) -> None:
    """Play BOOK one word at a time. Ctrl-C pauses and saves the position."""

    cfg, library = _load(ctx)
    book = _find(library, book_ref)
    if not book.words:
        _safe_exit(EXIT_EMPTY, f"'{book.title}' has no words to read")

    advanced = 0

    def on_word(current: Book) -> None:
        nonlocal advanced
        advanced += 1
        _echo_frame(current)
        if limit is not None and advanced >= limit:
            session.pause()

    session = ReadingSession(library, book.id, cfg.reader, on_word=on_word)
    try:
        if restart:
            session.restart()
        if wpm is not None:
            session.set_wpm(wpm)
        if _state(ctx).verbose:
            typer.echo(
                f"Reading '{book.title}' at {book.words_per_minute:.0f} wpm "
                f"from word {format_position(book)}",
                err=True,
            )

        _echo_frame(book)
        session.play()
        try:
            while not session.wait(0.25):
                pass
        except KeyboardInterrupt:
            typer.echo("Paused", err=True)
        finally:
            session.close()
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))

    if session.error is not None:
        code = EXIT_IO if isinstance(session.error, OSError) else EXIT_LIBRARY
        _safe_exit(code, str(session.error))

    typer.echo(f"Stopped at {format_position(book)} ({format_progress(book)})", err=True)


@app.command("wpm")
def wpm_cmd(
    ctx: typer.Context,
    book_ref: str = typer.Argument(..., metavar="BOOK", help="Title, id or id prefix"),
    value: float = typer.Argument(..., help="Words per minute"),  # noqa: B008
) -> None:
    """Set the pace of BOOK (clamped and snapped to the configured range)."""

    cfg, library = _load(ctx)
    book = _find(library, book_ref)
    session = ReadingSession(library, book.id, cfg.reader)
    try:
        applied = session.set_wpm(value)
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    typer.echo(f"'{book.title}' pace set to {applied:.0f} wpm")


@app.command()
def seek(
    ctx: typer.Context,
    book_ref: str = typer.Argument(..., metavar="BOOK", help="Title, id or id prefix"),
    index: int = typer.Argument(..., help="Zero-based word index"),  # noqa: B008
) -> None:
    """Move the reading position of BOOK to INDEX."""

    cfg, library = _load(ctx)
    book = _find(library, book_ref)
    session = ReadingSession(library, book.id, cfg.reader)
    try:
        session.seek(index)
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    typer.echo(f"'{book.title}' at {format_position(book)} ({format_progress(book)})")


@app.command()
def remove(
    ctx: typer.Context,
    book_ref: str = typer.Argument(..., metavar="BOOK", help="Title, id or id prefix"),
) -> None:
    """Delete BOOK from the library."""

    _, library = _load(ctx)
    book = _find(library, book_ref)
    library.remove(book.id)
    _save(library)
    typer.echo(f"Removed '{book.title}'")


__all__ = ["app", "main"]
