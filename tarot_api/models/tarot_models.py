# tarot_api/models/tarot_models.py
from pydantic import BaseModel, ConfigDict
from typing import List

REVERSED_MARKER = "(Reversed)"


class Card(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    type: str
    meaning_up: str
    meaning_rev: str
    desc: str
    name_short: str


class DrawnCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: Card
    reversed: bool

    @property
    def display_name(self) -> str:
        if self.reversed:
            return f"{self.card.name} {REVERSED_MARKER}"
        return self.card.name


class JSONCard(BaseModel):
    name: str
    type: str
    meaning_up: str
    meaning_rev: str
    desc: str
    image_file_name: str
    reversed: bool


class DrawResponse(BaseModel):
    cards: List[JSONCard]
    requestID: str


class InterpretationResponse(BaseModel):
    interpretation: str


class ErrorResponse(BaseModel):
    error: str
