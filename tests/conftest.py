"""Pytest configuration and fixtures for scryfall_query tests."""

import json
import threading
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional

import pytest
import requests
import responses

from scryfall_query.client import ScryfallClient
from scryfall_query.pacing import PacingPolicy
from scryfall_query.scryfall_query_config import ScryfallQueryConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "scryfall"

API = "https://api.scryfall.com"


def load_fixture(name: str) -> Dict[str, Any]:
    """Load a JSON fixture file and return parsed data."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text())


def make_card(name: str, set_code: str = "lea", number: str = "1") -> Dict[str, Any]:
    """Minimal Scryfall card object."""
    return {
        "object": "card",
        "id": f"{set_code}-{number}-{name}".lower().replace(" ", "-"),
        "name": name,
        "set": set_code,
        "collector_number": number,
        "lang": "en",
    }


def make_page(
    cards: List[Dict[str, Any]], next_page: Optional[str] = None
) -> Dict[str, Any]:
    """Scryfall List object wrapping the given records."""
    page: Dict[str, Any] = {
        "object": "list",
        "total_cards": len(cards),
        "has_more": next_page is not None,
        "data": cards,
    }
    if next_page is not None:
        page["next_page"] = next_page
    return page


class RecordingPacing(PacingPolicy):
    """Pacing policy that never sleeps but remembers each wait."""

    def __init__(self) -> None:
        self.waits = 0

    def wait(self, cancel_event: Optional[threading.Event] = None) -> bool:
        self.waits += 1
        return not (cancel_event is not None and cancel_event.is_set())


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Generator[None, None, None]:
    """Give every test a freshly loaded configuration."""
    ScryfallQueryConfig._instance = None
    yield
    ScryfallQueryConfig._instance = None


@pytest.fixture
def pacing() -> RecordingPacing:
    return RecordingPacing()


@pytest.fixture
def client(pacing: RecordingPacing) -> ScryfallClient:
    """Client on a plain session so responses sees every call exactly once."""
    return ScryfallClient(base_url=API, pacing=pacing, session=requests.Session())


@pytest.fixture
def mocked_responses() -> Generator[responses.RequestsMock, None, None]:
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def card_factory():
    return make_card


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def fixture_loader():
    return load_fixture
