# tarot_api/core/startup.py
import logging

from fastapi import FastAPI
from google import genai

from tarot_api.core.config import get_settings
from tarot_api.services.draw_services import seed_random_source

logger = logging.getLogger(__name__)

llm_clients = {}


async def startup_event(app: FastAPI):
    """
    Initialize resources on application startup.
    """
    settings = get_settings()

    seed_random_source(settings.RANDOM_SEED)
    logger.info("Random source seeded.")

    if settings.TESTING:
        logger.info("TESTING is enabled, readings will use the test interpretation.")
        return

    if not settings.GEMINI_API_KEY:
        raise RuntimeError("Environment variable GEMINI_API_KEY must be set unless TESTING is enabled.")

    try:
        llm_clients["gemini"] = genai.Client(api_key=settings.GEMINI_API_KEY)
        logger.info(f"Gemini client initialized for model {settings.GEMINI_MODEL}.")
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client: {e}")
        raise
