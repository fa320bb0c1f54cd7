"""Recover ``Term: Definition`` pairs from free-form model output.

Lines that don't look like a flashcard (blank lines, preambles such as
"Here are your flashcards", markdown headings without a colon) are dropped
silently. Only the first colon separates term from definition; any later
colons stay in the definition, so a term can never contain a colon.
"""

from __future__ import annotations

from typing import Optional

from cardsmith.modules.flashcards.models import Flashcard, FlashcardSet


def parse_line(line: str) -> Optional[Flashcard]:
    parts = line.split(":")
    if len(parts) < 2 or not parts[0].strip():
        return None
    term = parts[0].strip()
    definition = ":".join(parts[1:]).strip()
    if not definition:
        return None
    return Flashcard(term=term, definition=definition)


def parse_flashcards(raw: Optional[str]) -> FlashcardSet:
    """Parse every line of ``raw``; never raises on malformed text."""
    cards: list[Flashcard] = []
    for line in (raw or "").split("\n"):
        card = parse_line(line)
        if card is not None:
            cards.append(card)
    return FlashcardSet(flashcards=cards)
