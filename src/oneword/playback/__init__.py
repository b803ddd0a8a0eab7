"""Fixed-interval playback of a book's words."""

from .pacing import clamp_wpm, interval_for
from .session import ReadingSession
from .timer import RepeatingTimer

__all__ = ["ReadingSession", "RepeatingTimer", "clamp_wpm", "interval_for"]
