# tarot_api/services/deck_services.py
import logging
from typing import List, Optional

import httpx

from tarot_api.core.errors import DeckFetchError
from tarot_api.data.tarot import load_tarot_data, parse_tarot_deck
from tarot_api.models.tarot_models import Card

logger = logging.getLogger(__name__)


class CardSource:
    """
    Fetches the full deck once per draw. Reads TAROT_DECK_FILE when one is configured,
    otherwise calls the tarot card API.
    """

    def __init__(
        self,
        api_url: str,
        timeout: float = 10.0,
        deck_file: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self.deck_file = deck_file
        self.transport = transport

    async def fetch_cards(self) -> List[Card]:
        if self.deck_file:
            return load_tarot_data(self.deck_file)
        return await self._fetch_remote()

    async def _fetch_remote(self) -> List[Card]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.api_url)
        except httpx.HTTPError as e:
            logger.error(f"GET {self.api_url} failed: {e}")
            raise DeckFetchError(f"failed to make GET request: {e}") from e

        if response.status_code != 200:
            logger.error(f"GET {self.api_url} returned {response.status_code}")
            raise DeckFetchError(f"card API returned status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Card API returned a body that is not JSON: {e}")
            raise DeckFetchError(f"failed to decode JSON response: {e}") from e

        cards = parse_tarot_deck(data)
        logger.debug(f"Fetched {len(cards)} cards from {self.api_url}")
        return cards
