# tarot_api/services/draw_services.py
import random
from typing import List, Optional, Sequence

from tarot_api.core.errors import DrawError
from tarot_api.models.tarot_models import Card, DrawnCard

THREE_CARD_SPREAD = 3

# Seeded once per process; see seed_random_source.
rng = random.Random()


def seed_random_source(seed: Optional[int] = None) -> None:
    rng.seed(seed)


def draw_cards(deck: Sequence[Card], n: int = THREE_CARD_SPREAD, randomiser: Optional[random.Random] = None) -> List[DrawnCard]:
    """
    Draw n cards with distinct names from the deck, in draw order, each with an
    independent coin flip for its orientation.

    Raises DrawError if the deck holds fewer than n distinct card names.
    """
    if n < 0:
        raise ValueError(f"Cannot draw a negative number of cards: {n}")
    randomiser = randomiser or rng

    if not deck:
        raise DrawError("Cannot draw from an empty deck")

    distinct_names = {card.name for card in deck}
    if len(distinct_names) < n:
        raise DrawError(f"Deck has {len(distinct_names)} distinct cards, cannot draw {n}")

    drawn: List[DrawnCard] = []
    drawn_names = set()
    while len(drawn) < n:
        card = deck[randomiser.randrange(len(deck))]
        if card.name in drawn_names:
            continue
        drawn_names.add(card.name)
        drawn.append(DrawnCard(card=card, reversed=randomiser.random() < 0.5))
    return drawn
