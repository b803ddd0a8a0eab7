"""The persisted :class:`Book` model.

A book owns its word sequence, the reading cursor and its own pacing.  For
bilingual books ``secondary_words`` runs parallel to ``words`` and has the same
length.  The cursor invariant ``current_word_index < len(words)`` is enforced
whenever the book has words; a book without words keeps the cursor at ``0``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, confloat, conint, model_validator


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Book(BaseModel):
    """A document in the library together with its reading state."""

    id: UUID = Field(default_factory=uuid4)
    title: str
    words: list[str]
    secondary_words: list[str] | None = None
    current_word_index: conint(ge=0) = 0
    words_per_minute: confloat(gt=0) = 250.0
    date_added: datetime = Field(default_factory=_now)

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @model_validator(mode="after")
    def _check_cursor(self) -> "Book":
        limit = max(len(self.words) - 1, 0)
        if self.current_word_index > limit:
            raise ValueError(
                f"current_word_index {self.current_word_index} out of range for "
                f"{len(self.words)} words"
            )
        return self

    @property
    def is_dual_language(self) -> bool:
        return bool(self.secondary_words)

    @property
    def progress(self) -> float:
        """Percentage of the book before the cursor, ``0`` for empty books."""

        if not self.words:
            return 0.0
        return self.current_word_index / len(self.words) * 100

    @property
    def is_at_end(self) -> bool:
        return self.current_word_index >= len(self.words) - 1

    @property
    def current_word(self) -> str | None:
        if not self.words:
            return None
        return self.words[self.current_word_index]

    @property
    def current_secondary_word(self) -> str | None:
        if not self.secondary_words or self.current_word_index >= len(self.secondary_words):
            return None
        return self.secondary_words[self.current_word_index]


__all__ = ["Book"]
