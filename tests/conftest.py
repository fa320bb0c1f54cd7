import pytest
from fastapi.testclient import TestClient

from cardsmith.apis.deps import get_flashcards_generator, get_theme_preference
from cardsmith.core.theme import InMemoryStore, ThemePreference
from cardsmith.modules.flashcards.main import FlashcardsGenerator
from main import create_app


class FakeModel:
    """Stands in for the model call; records every prompt it receives."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def __call__(self, model, prompt):
        self.calls.append((model, prompt))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_model():
    return FakeModel(reply="Hello: Hola\nGoodbye: Adiós")


@pytest.fixture
def flashcards_generator(fake_model):
    return FlashcardsGenerator(model="fake-model", generate_fn=fake_model)


@pytest.fixture
def theme_preference():
    return ThemePreference(InMemoryStore())


@pytest.fixture
def client(flashcards_generator, theme_preference):
    app = create_app()
    app.dependency_overrides[get_flashcards_generator] = lambda: flashcards_generator
    app.dependency_overrides[get_theme_preference] = lambda: theme_preference
    with TestClient(app) as c:
        yield c
