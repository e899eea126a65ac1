# tarot_api/core/dependencies.py
from typing import Optional

from fastapi import Depends
from google import genai

from tarot_api.core.config import Settings, get_settings
from tarot_api.core.startup import llm_clients
from tarot_api.data.interpretation_store import InterpretationStore, interpretation_store
from tarot_api.services.deck_services import CardSource


def get_card_source(settings: Settings = Depends(get_settings)) -> CardSource:
    """Dependency to provide the card source for a draw."""
    return CardSource(
        settings.TAROT_API_URL,
        timeout=settings.CARD_FETCH_TIMEOUT,
        deck_file=settings.TAROT_DECK_FILE,
    )


def get_interpretation_store() -> InterpretationStore:
    return interpretation_store


def get_llm_client() -> Optional[genai.Client]:
    """The Gemini client built at startup, or None when running in TESTING mode."""
    return llm_clients.get("gemini")
