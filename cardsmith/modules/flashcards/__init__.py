"""Flashcards module exports."""

from .models import Flashcard, FlashcardSet, GenerationResult
from .parser import parse_flashcards
from .prompts import build_prompt, is_url
from .export import to_csv
from .main import FlashcardsGenerator

__all__ = [
    "Flashcard",
    "FlashcardSet",
    "GenerationResult",
    "parse_flashcards",
    "build_prompt",
    "is_url",
    "to_csv",
    "FlashcardsGenerator",
]
