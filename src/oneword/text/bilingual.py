"""Bilingual word pairing for documents that interleave two scripts.

Some documents, typically translations printed verse by verse, mix a primary
script (e.g. Latin) with a secondary one (e.g. Arabic).  The heuristic here
does not align sentences; it only classifies each word by script and pads the
two streams to equal length so that index ``i`` of both lists can be shown
together.

Rules
-----
1. Split the text into words with :func:`oneword.text.words.split_words`.
2. A word belongs to the secondary stream if *any* of its code points lies in
   the inclusive range ``[script_start, script_end]``; otherwise it belongs to
   the primary stream.  Relative order inside each stream is preserved.
3. The shorter stream is padded at the end with ``pad_token``.
"""

from __future__ import annotations

from collections.abc import Iterable

from .words import split_words


def has_script(word: str, script_start: int, script_end: int) -> bool:
    """Return ``True`` if ``word`` contains a code point in the given range."""

    return any(script_start <= ord(ch) <= script_end for ch in word)


def separate_languages(
    text: str,
    *,
    script_start: int,
    script_end: int,
    pad_token: str = "",
) -> tuple[list[str], list[str]]:
    """Split ``text`` into equally long ``(primary, secondary)`` word lists."""

    primary: list[str] = []
    secondary: list[str] = []
    for word in split_words(text):
        if has_script(word, script_start, script_end):
            secondary.append(word)
        else:
            primary.append(word)

    length = max(len(primary), len(secondary))
    primary.extend([pad_token] * (length - len(primary)))
    secondary.extend([pad_token] * (length - len(secondary)))
    return primary, secondary


def is_dual_language_title(title: str, keywords: Iterable[str]) -> bool:
    """Return ``True`` when ``title`` contains any keyword, ignoring case."""

    lowered = title.lower()
    return any(keyword.lower() in lowered for keyword in keywords if keyword)


__all__ = ["has_script", "is_dual_language_title", "separate_languages"]
