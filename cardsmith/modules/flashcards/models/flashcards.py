"""Pydantic models for parsed flashcards.

A ``FlashcardSet`` is an ordered value: insertion order is display order and
export order. It is created fresh for every generation and never merged.
"""

from __future__ import annotations

from typing import Iterator, Literal

from pydantic import BaseModel, Field, field_validator

PromptKind = Literal["url", "topic"]


class Flashcard(BaseModel):
    """Simple term/definition flashcard."""

    term: str
    definition: str

    @field_validator("term", "definition")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class FlashcardSet(BaseModel):
    """Ordered flashcards derived from one model response."""

    flashcards: list[Flashcard] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.flashcards)

    def __iter__(self) -> Iterator[Flashcard]:  # type: ignore[override]
        return iter(self.flashcards)

    @property
    def is_empty(self) -> bool:
        return not self.flashcards


class GenerationResult(BaseModel):
    topic: str
    prompt_kind: PromptKind
    model: str
    raw_text: str
    flashcard_set: FlashcardSet
