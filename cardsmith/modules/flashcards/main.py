"""Flashcards service class.

Provides a high-level class that turns a topic into a parsed ``FlashcardSet``
so API handlers and the CLI share one code path:

    svc = FlashcardsGenerator()
    result = await svc.generate("Roman history")
    for card in result.flashcard_set:
        print(card.term, card.definition)
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from cardsmith.core.exceptions import (
    EmptyResponseError,
    EmptyTopicError,
    GenerationInProgressError,
    NoFlashcardsError,
)
from cardsmith.core.logging import get_logger
from cardsmith.modules.flashcards import generator
from cardsmith.modules.flashcards.models import GenerationResult
from cardsmith.modules.flashcards.parser import parse_flashcards
from cardsmith.modules.flashcards.prompts import build_prompt, prompt_kind

logger = get_logger(__name__)

GenerateFn = Callable[[str, str], Awaitable[str]]


class FlashcardsGenerator:
    """Runs prompt building, the model call and parsing for one topic.

    Only one generation may be in flight per instance; a concurrent call is
    rejected instead of queued.
    """

    def __init__(
        self,
        *,
        model: Optional[str] = None,
        generate_fn: Optional[GenerateFn] = None,
    ) -> None:
        self.model = model or generator.default_model_name()
        self._generate_fn = generate_fn
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    async def _call_model(self, prompt: str) -> str:
        fn = self._generate_fn or generator.generate
        return await fn(self.model, prompt)

    async def generate(self, topic: str) -> GenerationResult:
        topic = (topic or "").strip()
        if not topic:
            raise EmptyTopicError()
        if self._lock.locked():
            raise GenerationInProgressError()

        async with self._lock:
            kind = prompt_kind(topic)
            logger.info("Generating flashcards: model=%s kind=%s", self.model, kind)
            text = await self._call_model(build_prompt(topic))

        if not text:
            logger.warning("Empty response from %s", self.model)
            raise EmptyResponseError()

        cards = parse_flashcards(text)
        if cards.is_empty:
            logger.warning("Response from %s had no parseable flashcards", self.model)
            raise NoFlashcardsError(raw_text=text)

        logger.info("Parsed %d flashcards", len(cards))
        return GenerationResult(
            topic=topic,
            prompt_kind=kind,
            model=self.model,
            raw_text=text,
            flashcard_set=cards,
        )

    def generate_sync(self, topic: str) -> GenerationResult:
        return asyncio.run(self.generate(topic))
