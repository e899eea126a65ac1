# tarot_api/api/routes/tarot_routes.py
import logging

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import JSONResponse

from tarot_api.core.config import Settings, get_settings
from tarot_api.core.dependencies import get_card_source, get_interpretation_store, get_llm_client
from tarot_api.core.errors import DeckFetchError, DrawError, LookupNotFound, internal_error_message
from tarot_api.data.interpretation_store import InterpretationStore
from tarot_api.models.tarot_models import DrawResponse, ErrorResponse, InterpretationResponse
from tarot_api.services.deck_services import CardSource
from tarot_api.services.tarot_services import (
    convert_cards_to_json,
    draw_three_cards,
    get_interpretation,
    interpret_in_background,
    new_request_id,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=DrawResponse, responses={500: {"model": ErrorResponse}})
async def get_and_interpret_three_cards(
    background_tasks: BackgroundTasks,
    userstory: str = "",
    name: str = "",
    card_source: CardSource = Depends(get_card_source),
    settings: Settings = Depends(get_settings),
    store: InterpretationStore = Depends(get_interpretation_store),
    llm_client=Depends(get_llm_client),
):
    """
    Draw three cards (past, present, future) and return them straight away with a
    requestID. The reading is generated in the background; poll
    /cards/interpret/{requestID} for it.
    """
    try:
        drawn_cards = await draw_three_cards(card_source)
    except DeckFetchError as e:
        return JSONResponse(
            status_code=500,
            content={"error": internal_error_message(e, "Failed to fetch tarot cards", settings.DEBUG)},
        )
    except DrawError as e:
        logger.error(f"Failed to draw tarot cards: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": internal_error_message(e, "Failed to draw tarot cards", settings.DEBUG)},
        )

    request_id = new_request_id()
    background_tasks.add_task(
        interpret_in_background,
        request_id,
        drawn_cards,
        userstory,
        name,
        settings,
        llm_client,
        store,
    )
    logger.info(f"[{request_id}] Drew {', '.join(drawn.display_name for drawn in drawn_cards)}")
    return DrawResponse(cards=convert_cards_to_json(drawn_cards), requestID=request_id)


@router.get(
    "/interpret/{request_id}",
    response_model=InterpretationResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_card_interpretation(
    request_id: str,
    store: InterpretationStore = Depends(get_interpretation_store),
):
    """Fetch the reading for a previous draw, if it is ready."""
    try:
        interpretation = get_interpretation(request_id, store)
    except LookupNotFound:
        logger.info(f"[{request_id}] No interpretation available yet")
        return JSONResponse(status_code=404, content={"error": "No interpretation found for this request ID"})
    return InterpretationResponse(interpretation=interpretation)
