# tests/conftest.py
import os

os.environ.setdefault("TESTING", "True")

import pytest
from fastapi.testclient import TestClient

from tarot_api.core.config import Settings, get_settings
from tarot_api.core.dependencies import get_card_source, get_interpretation_store, get_llm_client
from tarot_api.data.interpretation_store import InterpretationStore
from tarot_api.main import app
from tarot_api.models.tarot_models import Card

MAJOR_ARCANA = [
    "The Fool", "The Magician", "The High Priestess", "The Empress", "The Emperor",
    "The Hierophant", "The Lovers", "The Chariot", "Strength", "The Hermit",
    "Wheel of Fortune", "Justice", "The Hanged Man", "Death", "Temperance",
    "The Devil", "The Tower", "The Star", "The Moon", "The Sun", "Judgement", "The World",
]


def make_card(name: str, index: int = 0) -> Card:
    return Card(
        name=name,
        type="major",
        meaning_up=f"{name} upright",
        meaning_rev=f"{name} reversed",
        desc=f"A card called {name}.",
        name_short=f"ar{index:02d}",
    )


class StaticCardSource:
    def __init__(self, cards):
        self.cards = cards

    async def fetch_cards(self):
        return list(self.cards)


@pytest.fixture
def deck():
    return [make_card(name, i) for i, name in enumerate(MAJOR_ARCANA)]


@pytest.fixture
def store():
    return InterpretationStore()


@pytest.fixture
def settings():
    return Settings(TESTING=True, _env_file=None)


@pytest.fixture
def client(deck, store, settings):
    app.dependency_overrides[get_card_source] = lambda: StaticCardSource(deck)
    app.dependency_overrides[get_interpretation_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_llm_client] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()
