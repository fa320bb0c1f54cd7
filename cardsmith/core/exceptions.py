"""Error types raised by the flashcard pipeline.

Every error is terminal for the current operation only; callers report the
message and stay usable for the next attempt.
"""

from __future__ import annotations


EMPTY_TOPIC_MESSAGE = "Please enter a topic, URL, or import a file."
EMPTY_RESPONSE_MESSAGE = (
    "Failed to generate flashcards or received an empty response. Please try again."
)
NO_FLASHCARDS_MESSAGE = (
    "No valid flashcards could be generated from the response. "
    "Please check the format."
)
IN_PROGRESS_MESSAGE = "Flashcards are already being generated. Please wait."
EMPTY_EXPORT_MESSAGE = "There are no flashcards to export."


class CardsmithError(Exception):
    """Base class for all application errors."""

    default_message = "An unknown error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyTopicError(CardsmithError):
    default_message = EMPTY_TOPIC_MESSAGE


class GenerationError(CardsmithError):
    """The model provider call failed (network, auth, quota, ...)."""


class EmptyResponseError(CardsmithError):
    default_message = EMPTY_RESPONSE_MESSAGE


class NoFlashcardsError(CardsmithError):
    """The model answered, but no line parsed as a flashcard."""

    default_message = NO_FLASHCARDS_MESSAGE

    def __init__(self, message: str | None = None, *, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text


class GenerationInProgressError(CardsmithError):
    default_message = IN_PROGRESS_MESSAGE


class FileImportError(CardsmithError):
    def __init__(self, message: str | None = None, *, filename: str | None = None) -> None:
        super().__init__(f"Error reading file: {message or 'unknown error'}")
        self.filename = filename


class ExportError(CardsmithError):
    default_message = EMPTY_EXPORT_MESSAGE
