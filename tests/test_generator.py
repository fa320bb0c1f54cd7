import asyncio

import pytest

import cardsmith.modules.flashcards.generator as gen
from cardsmith.core.exceptions import (
    EmptyResponseError,
    EmptyTopicError,
    GenerationError,
    GenerationInProgressError,
    NoFlashcardsError,
)
from cardsmith.modules.flashcards.main import FlashcardsGenerator
from cardsmith.modules.flashcards.prompts import build_prompt


class FakeAgent:
    reply = "Capital of France: Paris"
    error = None

    def __init__(self, *args, **kwargs):
        self.kwargs = kwargs

    async def run(self, prompt):
        if FakeAgent.error is not None:
            raise FakeAgent.error

        class Result:
            output = FakeAgent.reply

        return Result()

    def __class_getitem__(cls, item):
        return cls


@pytest.fixture
def fake_agent(monkeypatch):
    FakeAgent.reply = "Capital of France: Paris"
    FakeAgent.error = None
    monkeypatch.setattr(gen, "Agent", FakeAgent)
    monkeypatch.setattr(gen, "build_model", lambda name: name)
    return FakeAgent


def test_generate_returns_model_text(fake_agent):
    assert gen.generate_sync("gemini-2.5-flash", "prompt") == "Capital of France: Paris"


def test_generate_returns_empty_string_for_no_text(fake_agent):
    fake_agent.reply = None
    assert gen.generate_sync("gemini-2.5-flash", "prompt") == ""


def test_provider_failure_becomes_generation_error(fake_agent):
    fake_agent.error = RuntimeError("API key not valid")
    with pytest.raises(GenerationError) as exc:
        gen.generate_sync("gemini-2.5-flash", "prompt")
    assert exc.value.message == "API key not valid"


def test_model_build_failure_becomes_generation_error(monkeypatch):
    def boom(name):
        raise RuntimeError("OpenRouter API key not configured.")

    monkeypatch.setattr(gen, "build_model", boom)
    with pytest.raises(GenerationError, match="OpenRouter API key"):
        gen.generate_sync("x-ai/model", "prompt")


def test_service_builds_prompt_and_parses(flashcards_generator, fake_model):
    result = flashcards_generator.generate_sync("  Spanish Greetings  ")
    assert result.topic == "Spanish Greetings"
    assert result.prompt_kind == "topic"
    assert result.model == "fake-model"
    assert [(c.term, c.definition) for c in result.flashcard_set] == [
        ("Hello", "Hola"),
        ("Goodbye", "Adiós"),
    ]
    assert fake_model.calls == [("fake-model", build_prompt("Spanish Greetings"))]


def test_service_uses_url_template(flashcards_generator, fake_model):
    result = flashcards_generator.generate_sync("https://example.com/page")
    assert result.prompt_kind == "url"
    assert "content at this URL" in fake_model.calls[0][1]


def test_blank_topic_never_calls_model(flashcards_generator, fake_model):
    with pytest.raises(EmptyTopicError):
        flashcards_generator.generate_sync("   ")
    assert fake_model.calls == []


@pytest.mark.parametrize("reply", ["", None])
def test_empty_reply_is_reported_separately(flashcards_generator, fake_model, reply):
    fake_model.reply = reply
    with pytest.raises(EmptyResponseError):
        flashcards_generator.generate_sync("Roman history")


def test_whitespace_reply_goes_through_the_parser(flashcards_generator, fake_model):
    fake_model.reply = "   \n  "
    with pytest.raises(NoFlashcardsError) as exc:
        flashcards_generator.generate_sync("Roman history")
    assert exc.value.raw_text == "   \n  "


def test_unparseable_reply(flashcards_generator, fake_model):
    fake_model.reply = "I'm sorry, I can't help with that."
    with pytest.raises(NoFlashcardsError) as exc:
        flashcards_generator.generate_sync("Roman history")
    assert exc.value.raw_text == fake_model.reply


def test_generation_error_propagates_and_service_recovers(flashcards_generator, fake_model):
    fake_model.error = GenerationError("quota exceeded")
    with pytest.raises(GenerationError, match="quota exceeded"):
        flashcards_generator.generate_sync("Roman history")

    fake_model.error = None
    assert not flashcards_generator.busy
    assert len(flashcards_generator.generate_sync("Roman history").flashcard_set) == 2


def test_second_request_is_rejected_while_first_runs():
    started = asyncio.Event()
    release = asyncio.Event()

    async def slow_model(model, prompt):
        started.set()
        await release.wait()
        return "A: B"

    async def scenario():
        svc = FlashcardsGenerator(model="fake-model", generate_fn=slow_model)
        first = asyncio.create_task(svc.generate("topic one"))
        await started.wait()
        assert svc.busy
        with pytest.raises(GenerationInProgressError):
            await svc.generate("topic two")
        release.set()
        result = await first
        assert not svc.busy
        return result

    result = asyncio.run(scenario())
    assert result.topic == "topic one"
