from .flashcards import Flashcard, FlashcardSet, GenerationResult, PromptKind

__all__ = [
    "Flashcard",
    "FlashcardSet",
    "GenerationResult",
    "PromptKind",
]
