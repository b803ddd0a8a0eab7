"""Turning extracted document text into word sequences."""

from .bilingual import has_script, is_dual_language_title, separate_languages
from .words import split_words

__all__ = ["has_script", "is_dual_language_title", "separate_languages", "split_words"]
