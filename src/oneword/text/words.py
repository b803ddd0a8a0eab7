"""Whitespace word splitting.

Words are the maximal runs of non-whitespace characters.  Any Unicode
whitespace (including newlines and no-break spaces) separates words and empty
components are dropped, so the result never contains ``""``.

>>> split_words("one  two\\nthree ")
['one', 'two', 'three']
"""

from __future__ import annotations


def split_words(text: str) -> list[str]:
    """Return the words of ``text`` in reading order."""

    return text.split()


__all__ = ["split_words"]
