# tests/test_deck_services.py
import asyncio
import json
import logging

import httpx
import pytest

from tarot_api.core.errors import DeckFetchError
from tarot_api.services.deck_services import CardSource

API_URL = "https://tarot.example/api/v1/cards"

CARD_PAYLOAD = {
    "name": "The Fool",
    "name_short": "ar00",
    "value": "0",
    "value_int": 0,
    "type": "major",
    "meaning_up": "Folly, mania, extravagance",
    "meaning_rev": "Negligence, absence, distribution",
    "desc": "With light step, as if earth and its trammels had little power to restrain him.",
}


def source_for(handler):
    return CardSource(API_URL, timeout=1.0, transport=httpx.MockTransport(handler))


def test_fetch_cards_parses_provider_payload():
    def handler(request):
        assert str(request.url) == API_URL
        return httpx.Response(200, json={"nhits": 1, "cards": [CARD_PAYLOAD]})

    cards = asyncio.run(source_for(handler).fetch_cards())
    assert len(cards) == 1
    assert cards[0].name == "The Fool"
    assert cards[0].name_short == "ar00"


def test_fetch_cards_non_200_is_deck_fetch_error():
    source = source_for(lambda request: httpx.Response(503, text="unavailable"))
    with pytest.raises(DeckFetchError):
        asyncio.run(source.fetch_cards())


def test_fetch_cards_transport_failure_is_deck_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(DeckFetchError):
        asyncio.run(source_for(handler).fetch_cards())


def test_fetch_cards_body_that_is_not_json_is_deck_fetch_error():
    source = source_for(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(DeckFetchError):
        asyncio.run(source.fetch_cards())


@pytest.mark.parametrize("payload", [{"cards": "nope"}, {"data": []}, [CARD_PAYLOAD], {"cards": [{"name": "The Fool"}]}])
def test_fetch_cards_malformed_deck_is_deck_fetch_error(payload):
    source = source_for(lambda request: httpx.Response(200, json=payload))
    with pytest.raises(DeckFetchError):
        asyncio.run(source.fetch_cards())


def test_deck_file_is_used_when_configured(tmp_path):
    deck_file = tmp_path / "deck.json"
    deck_file.write_text(json.dumps({"cards": [CARD_PAYLOAD]}), encoding="utf-8")

    def handler(request):
        raise AssertionError("the API should not be called when a deck file is set")

    source = CardSource(API_URL, deck_file=str(deck_file), transport=httpx.MockTransport(handler))
    cards = asyncio.run(source.fetch_cards())
    assert [card.name for card in cards] == ["The Fool"]


def test_missing_deck_file_is_deck_fetch_error(tmp_path):
    source = CardSource(API_URL, deck_file=str(tmp_path / "missing.json"))
    with pytest.raises(DeckFetchError):
        asyncio.run(source.fetch_cards())


def test_payload_without_cards_list_is_logged(caplog):
    source = source_for(lambda request: httpx.Response(200, json={"data": []}))
    with caplog.at_level(logging.ERROR):
        with pytest.raises(DeckFetchError):
            asyncio.run(source.fetch_cards())
    assert any("no 'cards' list" in r.getMessage() for r in caplog.records if r.levelno == logging.ERROR)
