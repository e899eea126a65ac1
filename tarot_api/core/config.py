# tarot_api/core/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.0-flash-lite"

    # When set, background readings skip the LLM and store TEST_INTERPRETATION.
    TESTING: bool = False
    TEST_INTERPRETATION: str = "This is a test interpretation"
    DEBUG: bool = False

    TAROT_API_URL: str = "https://tarotapi.dev/api/v1/cards"
    TAROT_DECK_FILE: Optional[str] = None
    CARD_FETCH_TIMEOUT: float = 10.0

    INTERPRETATION_TIMEOUT: float = 30.0
    INTERPRETATION_RETRIES: int = 1
    INTERPRETATION_MAX_TOKENS: int = 1000
    READER_NAME: str = "Cassandra"
    READING_WORD_LIMIT: int = 200

    RANDOM_SEED: Optional[int] = None

    ALLOWED_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"
        extra = "allow"


@lru_cache
def get_settings() -> Settings:
    return Settings()
