from __future__ import annotations

from functools import lru_cache

from cardsmith.core.config import settings
from cardsmith.core.theme import JsonFileStore, ThemePreference
from cardsmith.modules.flashcards.main import FlashcardsGenerator


@lru_cache(maxsize=1)
def get_flashcards_generator() -> FlashcardsGenerator:
    """Shared generator so the one-request-at-a-time rule holds app-wide."""
    return FlashcardsGenerator()


@lru_cache(maxsize=1)
def get_theme_preference() -> ThemePreference:
    return ThemePreference(JsonFileStore(settings.theme_store_path))
