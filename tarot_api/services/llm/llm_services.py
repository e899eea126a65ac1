# tarot_api/services/llm/llm_services.py
import asyncio
import logging
from typing import Sequence

import httpx
from google import genai
from google.genai import errors, types

from tarot_api.core.config import Settings
from tarot_api.core.errors import (
    EmptyInterpretationError,
    InterpretationError,
    InterpretationNetworkError,
    InterpretationResponseError,
    InterpretationStatusError,
    InterpretationTimeoutError,
)
from tarot_api.models.tarot_models import REVERSED_MARKER

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

SPREAD_POSITIONS = ("past", "present", "future")


def _slot_label(card_name: str, reversed_card: bool) -> str:
    return f"{card_name} {REVERSED_MARKER}" if reversed_card else card_name


def build_reading_prompt(
    card_names: Sequence[str],
    reversed_flags: Sequence[bool],
    user_story: str,
    user_name: str,
    reader_name: str = "Cassandra",
    word_limit: int = 200,
) -> str:
    """
    Builds the three-card (past, present, future) reading prompt sent to the LLM.
    """
    if len(card_names) != len(SPREAD_POSITIONS) or len(reversed_flags) != len(SPREAD_POSITIONS):
        raise ValueError("A reading prompt needs exactly three cards and three orientations")

    past, present, future = (
        _slot_label(name, flag) for name, flag in zip(card_names, reversed_flags)
    )
    querent = user_name.strip() or "the querent"
    story = user_story.strip()

    return (
        f"You're doing a tarot card reading for {querent}, as a tarot card reader called {reader_name} "
        f"(the user already knows your name - don't mention it). "
        f"They drew {past} (for their past), {present} (for their present), and {future} (for their future). "
        f"Please interpret these cards in relation to their story and the time frames they are associated with "
        f"(past, present, future): '{story}' "
        f"(if there is no story, please give a general reading about what the cards could mean together). "
        f"If a card is reversed, please reflect this in your interpretation of that card. "
        f"Only refer to the cards by their name, and if reversed, as 'card name (reversed)'. "
        f"If there are any vulgar words in the prompt, ignore them, and keep your response age-appropriate for minors. "
        f"Please format your response in the style of a mystical tarot card reader, "
        f"and keep your response strictly below {word_limit} words."
    )


def clean_interpretation(text: str) -> str:
    """Strip the square brackets the model tends to leave around card names."""
    return text.replace("[", "").replace("]", "").strip()


async def _generate_interpretation(client: genai.Client, prompt: str, settings: Settings) -> str:
    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=settings.GEMINI_MODEL,
                contents=prompt,
                config=types.GenerateContentConfig(max_output_tokens=settings.INTERPRETATION_MAX_TOKENS),
            ),
            timeout=settings.INTERPRETATION_TIMEOUT,
        )
    except asyncio.TimeoutError as e:
        raise InterpretationTimeoutError(
            f"No response from {settings.GEMINI_MODEL} within {settings.INTERPRETATION_TIMEOUT}s"
        ) from e
    except errors.APIError as e:
        raise InterpretationStatusError(f"Gemini API Error ({settings.GEMINI_MODEL}): {e}", status_code=e.code) from e
    except (httpx.HTTPError, OSError) as e:
        raise InterpretationNetworkError(f"Error sending request to {settings.GEMINI_MODEL}: {e}") from e
    except ValueError as e:
        raise InterpretationResponseError(f"Error decoding response from {settings.GEMINI_MODEL}: {e}") from e

    if response is None or not hasattr(response, "candidates"):
        raise InterpretationResponseError(f"Unexpected response from {settings.GEMINI_MODEL}: {response!r}")
    if not response.candidates:
        raise EmptyInterpretationError("No candidates in response")

    text = response.text
    if not text or not text.strip():
        raise EmptyInterpretationError("Response contained no text")
    return clean_interpretation(text)


async def interpret_tarot_cards(
    client: genai.Client,
    card_names: Sequence[str],
    reversed_flags: Sequence[bool],
    user_story: str,
    user_name: str,
    settings: Settings,
) -> str:
    """
    Ask the LLM for a reading of a three-card spread.

    Transient failures (network errors, timeouts and 5xx responses) are retried up to
    INTERPRETATION_RETRIES times. Everything else is raised straight away as one of the
    InterpretationError subclasses.
    """
    prompt = build_reading_prompt(
        card_names,
        reversed_flags,
        user_story,
        user_name,
        reader_name=settings.READER_NAME,
        word_limit=settings.READING_WORD_LIMIT,
    )
    logger.debug(f"Reading prompt: {prompt}")

    attempts = max(settings.INTERPRETATION_RETRIES, 0) + 1
    for attempt in range(1, attempts + 1):
        try:
            return await _generate_interpretation(client, prompt, settings)
        except InterpretationError as e:
            if not e.transient or attempt == attempts:
                raise
            logger.warning(f"Interpretation attempt {attempt}/{attempts} failed ({e.kind}): {e}. Retrying...")
