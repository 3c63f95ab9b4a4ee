"""Pytest configuration and fixtures for TCG Search tests.

Provides common fixtures for testing.
"""

from __future__ import annotations

import os

import httpx
import pytest

# The app module reads configuration at startup
os.environ.setdefault("JUSTTCG_API_KEY", "test-secret-key")

from tcgsearch.config import reset_config
from tcgsearch.integration.justtcg_client import JustTCGClient
from tcgsearch.models import Card, PriceHistoryPoint, Variant

TEST_API_KEY = "test-secret-key"


@pytest.fixture(autouse=True)
def api_key_env(monkeypatch):
    """Give every test the same API key and a fresh config singleton."""
    monkeypatch.setenv("JUSTTCG_API_KEY", TEST_API_KEY)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def games_payload() -> dict:
    """Upstream /games response."""
    return {
        "data": [
            {"id": 1, "name": "Pokemon", "slug": "pokemon"},
            {"id": 2, "name": "Magic: The Gathering", "slug": "magic-the-gathering"},
        ]
    }


@pytest.fixture
def card_payload() -> dict:
    """A single upstream card with two variants; the cheaper one trends up."""
    return {
        "id": "pokemon-base-set-pikachu",
        "name": "Pikachu",
        "game": "Pokemon",
        "set": "Base Set",
        "number": "58/102",
        "rarity": "Common",
        "tcgplayerId": "42346",
        "variants": [
            {
                "id": "v-holo",
                "condition": "Near Mint",
                "printing": "Holofoil",
                "language": "English",
                "price": 25.0,
                "lastUpdated": 1700000000,
                "priceChange24hr": -1.5,
                "priceChange7d": 0,
                "priceChange30d": 12.25,
                "priceHistory": [{"p": 26.0, "t": 1}, {"p": 25.0, "t": 2}],
            },
            {
                "id": "v-normal",
                "condition": "Near Mint",
                "printing": "Normal",
                "language": "English",
                "price": 12.3,
                "lastUpdated": 1700000000,
                "priceChange24hr": 5,
                "priceChange7d": -3.2,
                "priceChange30d": None,
                "priceHistory": [
                    {"p": 10.0, "t": 1},
                    {"p": 11.0, "t": 2},
                    {"p": 12.3, "t": 3},
                ],
            },
        ],
    }


@pytest.fixture
def cards_payload(card_payload: dict) -> dict:
    """Upstream /cards response."""
    return {"data": [card_payload]}


@pytest.fixture
def sample_card(card_payload: dict) -> Card:
    return Card.model_validate(card_payload)


@pytest.fixture
def make_variant():
    """Build a Variant with just the fields a test cares about."""

    def _make(id: str, price: float | None, history: list[float] | None = None) -> Variant:
        return Variant(
            id=id,
            price=price,
            price_history=tuple(
                PriceHistoryPoint(p=p, t=i) for i, p in enumerate(history or [])
            ),
        )

    return _make


@pytest.fixture
def upstream_requests() -> list[httpx.Request]:
    """Requests seen by the fake upstream, in order."""
    return []


@pytest.fixture
def make_client(upstream_requests: list[httpx.Request]):
    """Build a JustTCGClient whose transport is answered by `handler`."""

    def _make(handler, **kwargs) -> JustTCGClient:
        def _record(request: httpx.Request) -> httpx.Response:
            upstream_requests.append(request)
            return handler(request)

        return JustTCGClient(
            api_key=TEST_API_KEY,
            base_url="https://api.test/v1",
            transport=httpx.MockTransport(_record),
            **kwargs,
        )

    return _make
