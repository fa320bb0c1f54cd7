"""Text generation client using pydantic-ai.

The model is asked for plain text; structure is recovered afterwards by the
line parser. Provider imports are kept lazy to avoid import-time errors when
credentials are missing.
"""

from __future__ import annotations

import asyncio

from pydantic_ai import Agent
from pydantic_ai.exceptions import UnexpectedModelBehavior

from cardsmith.core.config import settings
from cardsmith.core.exceptions import GenerationError
from cardsmith.core.logging import get_logger

logger = get_logger(__name__)


def _build_google_model(model_name: str):
    """Build Google Gemini model for pydantic-ai (lazy import)."""
    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=settings.gemini_api_key)
    return GoogleModel(model_name, provider=provider)


def _build_openrouter_model(model_name: str):
    """Build OpenRouter model via OpenAI-compatible provider (lazy import)."""
    from pydantic_ai.models.openai import OpenAIChatModel
    from pydantic_ai.providers.openai import OpenAIProvider

    if not settings.openrouter_api_key:
        raise RuntimeError(
            "OpenRouter API key not configured. Set OPENROUTER_API_KEY in your environment."
        )

    provider = OpenAIProvider(
        api_key=settings.openrouter_api_key,
        base_url="https://openrouter.ai/api/v1",
    )
    return OpenAIChatModel(model_name, provider=provider)


def _provider() -> str:
    return (settings.model_provider or "google").lower()


def default_model_name() -> str:
    if _provider() == "openrouter":
        return settings.openrouter_model
    return settings.flashcards_model


def build_model(model_name: str):
    if _provider() == "openrouter":
        return _build_openrouter_model(model_name)
    return _build_google_model(model_name)


async def generate(model: str, prompt: str) -> str:
    """Send ``prompt`` to ``model`` and return the reply text.

    Returns ``""`` when the model produced no text. Any provider failure is
    re-raised as :class:`GenerationError` with a readable message.
    """
    try:
        agent: Agent[None, str] = Agent[None, str](
            model=build_model(model),
            output_type=str,
        )
        res = await agent.run(prompt)
    except UnexpectedModelBehavior as e:
        logger.warning("Model %s returned no usable text: %s", model, e)
        return ""
    except Exception as e:  # noqa: BLE001
        logger.error("Generation with %s failed: %s", model, e)
        raise GenerationError(str(e) or type(e).__name__) from e

    text = res.output or ""
    logger.debug("Raw model output (%d chars): %s", len(text), text[:400])
    return text


def generate_sync(model: str, prompt: str) -> str:
    """Synchronous wrapper if an event loop is unavailable."""
    return asyncio.run(generate(model, prompt))
