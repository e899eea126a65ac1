# tarot_api/data/tarot.py
import json
import logging
from typing import List

from pydantic import ValidationError

from tarot_api.core.errors import DeckFetchError
from tarot_api.models.tarot_models import Card

logger = logging.getLogger(__name__)


def parse_tarot_deck(data) -> List[Card]:
    """
    Turn a provider payload of the form {"cards": [...]} into Card records.
    """
    if not isinstance(data, dict) or not isinstance(data.get("cards"), list):
        logger.error("Deck payload has no 'cards' list")
        raise DeckFetchError("Deck payload has no 'cards' list")
    try:
        return [Card.model_validate(card) for card in data["cards"]]
    except ValidationError as e:
        logger.error(f"Deck contains an invalid card record: {e}")
        raise DeckFetchError(f"Invalid card record in deck: {e}") from e


def load_tarot_data(filepath) -> List[Card]:
    """
    Load a tarot deck from a JSON file shaped like the tarot API response.
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read deck file {filepath}: {e}")
        raise DeckFetchError(f"Failed to read deck file {filepath}: {e}") from e
    return parse_tarot_deck(data)
