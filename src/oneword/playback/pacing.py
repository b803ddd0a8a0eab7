"""Words-per-minute arithmetic."""

from __future__ import annotations

import math

from ..config import ReaderSettings


def interval_for(wpm: float) -> float:
    """Return the seconds each word stays on screen at ``wpm``."""

    if wpm <= 0:
        raise ValueError(f"words per minute must be positive, got {wpm}")
    return 60.0 / wpm


def clamp_wpm(value: float, settings: ReaderSettings) -> float:
    """Clamp ``value`` into the configured range and snap it to ``wpm_step``.

    Steps are counted from ``min_wpm`` so that the minimum itself is always a
    valid setting.  Halfway values round up.

    >>> from oneword.config import load_config
    >>> clamp_wpm(253, load_config().reader)
    250.0
    """

    low, high, step = settings.min_wpm, settings.max_wpm, settings.wpm_step
    bounded = min(max(float(value), low), high)
    snapped = low + math.floor((bounded - low) / step + 0.5) * step
    return float(min(snapped, high))


__all__ = ["clamp_wpm", "interval_for"]
