# tarot_api/services/tarot_services.py
import logging
import uuid
from typing import List, Optional

from google import genai

from tarot_api.core.config import Settings
from tarot_api.core.errors import InterpretationError, LookupNotFound
from tarot_api.data.interpretation_store import InterpretationStore
from tarot_api.models.tarot_models import DrawnCard, JSONCard
from tarot_api.services.deck_services import CardSource
from tarot_api.services.draw_services import THREE_CARD_SPREAD, draw_cards
from tarot_api.services.llm.llm_services import interpret_tarot_cards

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


def new_request_id() -> str:
    return str(uuid.uuid4())


def convert_cards_to_json(drawn_cards: List[DrawnCard]) -> List[JSONCard]:
    return [
        JSONCard(
            name=drawn.display_name,
            type=drawn.card.type,
            meaning_up=drawn.card.meaning_up,
            meaning_rev=drawn.card.meaning_rev,
            desc=drawn.card.desc,
            image_file_name=f"{drawn.card.name_short}.jpg",
            reversed=drawn.reversed,
        )
        for drawn in drawn_cards
    ]


async def draw_three_cards(card_source: CardSource) -> List[DrawnCard]:
    """
    Fetch the deck and draw a past/present/future spread from it.
    Raises DeckFetchError or DrawError.
    """
    deck = await card_source.fetch_cards()
    return draw_cards(deck, THREE_CARD_SPREAD)


async def interpret_in_background(
    request_id: str,
    drawn_cards: List[DrawnCard],
    user_story: str,
    user_name: str,
    settings: Settings,
    llm_client: Optional[genai.Client],
    store: InterpretationStore,
) -> None:
    """
    Runs after the draw response has been sent. On success the reading is stored under
    request_id; on failure nothing is stored and the failure is only logged, so a
    lookup keeps returning 404 for that ID.
    """
    if settings.TESTING:
        store.put(request_id, settings.TEST_INTERPRETATION)
        return

    if llm_client is None:
        logger.error(f"[{request_id}] No LLM client available, skipping interpretation")
        return

    try:
        interpretation = await interpret_tarot_cards(
            llm_client,
            [drawn.card.name for drawn in drawn_cards],
            [drawn.reversed for drawn in drawn_cards],
            user_story,
            user_name,
            settings,
        )
    except InterpretationError as e:
        logger.error(f"[{request_id}] Failed to interpret tarot cards ({e.kind}): {e}")
        return
    except Exception as e:
        logger.exception(f"[{request_id}] Unexpected error during interpretation: {e}")
        return

    store.put(request_id, interpretation)
    logger.info(f"[{request_id}] Interpretation stored ({len(interpretation)} chars).")


def get_interpretation(request_id: str, store: InterpretationStore) -> str:
    interpretation = store.get(request_id)
    if interpretation is None:
        raise LookupNotFound(request_id)
    return interpretation
