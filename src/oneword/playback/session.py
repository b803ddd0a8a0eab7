"""Playback state for one active book.

A :class:`ReadingSession` binds a single book of a :class:`~oneword.library.Library`
to a :class:`~oneword.playback.timer.RepeatingTimer`.  Each tick advances the
word cursor by one and saves the library, so the reading position survives an
abrupt exit.  Reaching the last word stops playback; the cursor stays on the
last word.

Timer ticks run on the timer thread while commands (toggle, pacing, seeking)
arrive from the caller's thread.  State changes happen under a lock; the timer
is never cancelled or joined while that lock is held.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from uuid import UUID

from ..config import ReaderSettings
from ..library.models import Book
from ..library.store import Library
from ..utils.logging import get_logger
from .pacing import clamp_wpm, interval_for
from .timer import RepeatingTimer

logger = get_logger(__name__)

WordCallback = Callable[[Book], None]


class ReadingSession:
    """Play, pause and pace one book of ``library``."""

    def __init__(
        self,
        library: Library,
        book_id: UUID,
        settings: ReaderSettings,
        *,
        on_word: WordCallback | None = None,
    ) -> None:
        self.library = library
        self.book_id = book_id
        self.settings = settings
        self.on_word = on_word
        self.is_playing = False
        self._lock = threading.RLock()
        self._timer = RepeatingTimer(self._tick, self._current_interval)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def book(self) -> Book | None:
        return self.library.get(self.book_id)

    @property
    def interval(self) -> float:
        """Seconds per word for the bound book."""

        return self._current_interval()

    @property
    def error(self) -> BaseException | None:
        return self._timer.error

    def _current_interval(self) -> float:
        book = self.book
        wpm = book.words_per_minute if book is not None else self.settings.default_wpm
        return interval_for(wpm)

    def _persist(self, book: Book) -> None:
        self.library.update(book)
        self.library.save()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle(self) -> bool:
        """Start or pause playback and return the new playing state."""

        with self._lock:
            if self.book is None:
                return self.is_playing
            self.is_playing = not self.is_playing
            playing = self.is_playing
        if playing:
            logger.debug("Playback started at %.0f wpm", 60.0 / self.interval)
            self._timer.start()
        else:
            logger.debug("Playback paused")
            self._timer.cancel()
        return playing

    def play(self) -> bool:
        if not self.is_playing:
            return self.toggle()
        return True

    def pause(self) -> bool:
        if self.is_playing:
            return self.toggle()
        return False

    def next_word(self) -> bool:
        """Advance the cursor by one word and save.

        At the last word playback stops instead.  Returns whether the cursor
        moved.  If saving fails the cursor is restored, playback stops and the
        error propagates.
        """

        with self._lock:
            book = self.book
            if book is None:
                self.is_playing = False
                advanced = False
            elif not book.is_at_end:
                book.current_word_index += 1
                try:
                    self._persist(book)
                except Exception:
                    book.current_word_index -= 1
                    self.is_playing = False
                    raise
                advanced = True
            else:
                self.is_playing = False
                advanced = False
        if not advanced:
            self._timer.cancel()
            logger.debug("Playback stopped at end of book")
            return False
        if self.on_word is not None:
            self.on_word(book)
        return True

    def set_wpm(self, value: float) -> float:
        """Store a new pace on the book, restarting the timer when playing."""

        wpm = clamp_wpm(value, self.settings)
        with self._lock:
            book = self.book
            if book is None:
                return wpm
            book.words_per_minute = wpm
            self._persist(book)
            playing = self.is_playing
        if playing:
            self._timer.restart()
        return wpm

    def seek(self, index: int) -> int:
        """Move the cursor to ``index`` (clamped to the book) and save."""

        with self._lock:
            book = self.book
            if book is None:
                return 0
            target = min(max(index, 0), max(len(book.words) - 1, 0))
            book.current_word_index = target
            self._persist(book)
            return target

    def restart(self) -> int:
        return self.seek(0)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until playback stops by itself or ``timeout`` elapses."""

        return self._timer.join(timeout)

    def close(self) -> None:
        """Pause playback and save the current position."""

        with self._lock:
            self.is_playing = False
        self._timer.cancel()
        with self._lock:
            book = self.book
            if book is not None:
                self._persist(book)

    # ------------------------------------------------------------------
    # Timer callback
    # ------------------------------------------------------------------

    def _tick(self) -> bool:
        return self.next_word()


__all__ = ["ReadingSession", "WordCallback"]
