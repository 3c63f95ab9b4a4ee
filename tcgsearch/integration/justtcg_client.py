"""JustTCG API client for game listings and card price search."""

from __future__ import annotations

import time
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from tcgsearch.config import DEFAULT_BASE_URL, AppConfig
from tcgsearch.models import Card, Game

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class JustTCGClient:
    """Client for the JustTCG pricing API.

    Every failure (transport error, non-2xx status, undecodable body) degrades
    to an empty list so the page can still render.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        games_cache_ttl_seconds: int = 86400,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise ValueError("JustTCG API key is required")

        self.base_url = base_url.rstrip("/")
        self.games_cache_ttl_seconds = games_cache_ttl_seconds
        self._games_cache: list[Game] | None = None
        self._games_cached_at = 0.0

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "x-api-key": api_key,
                "Accept": "application/json",
            },
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, config: AppConfig, transport: httpx.AsyncBaseTransport | None = None
    ) -> JustTCGClient:
        return cls(
            api_key=config.justtcg.api_key,
            base_url=config.justtcg.base_url,
            timeout=config.justtcg.timeout_seconds,
            games_cache_ttl_seconds=config.justtcg.games_cache_ttl_seconds,
            transport=transport,
        )

    async def _get_data(
        self, path: str, params: dict[str, str] | None = None
    ) -> list[Any] | None:
        """GET an endpoint and return its `data` list, or None on any failure."""
        try:
            response = await self.client.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.warning("upstream_request_failed", path=path, error=str(exc))
            return None

        if not response.is_success:
            logger.warning(
                "upstream_request_failed",
                path=path,
                status_code=response.status_code,
            )
            return None

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("upstream_invalid_json", path=path, error=str(exc))
            return None

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            logger.warning("upstream_missing_data", path=path)
            return None
        return data

    def _parse(self, model: type[ModelT], items: list[Any]) -> list[ModelT]:
        parsed = []
        for item in items:
            try:
                parsed.append(model.model_validate(item))
            except ValidationError as exc:
                logger.warning(
                    "upstream_item_skipped",
                    model=model.__name__,
                    errors=exc.error_count(),
                )
        return parsed

    async def get_games(self) -> list[Game]:
        """Fetch the list of games, reusing a successful response for the TTL window."""
        now = time.monotonic()
        if (
            self._games_cache is not None
            and now - self._games_cached_at < self.games_cache_ttl_seconds
        ):
            return list(self._games_cache)

        data = await self._get_data("/games")
        if data is None:
            return []

        games = self._parse(Game, data)
        self._games_cache = games
        self._games_cached_at = now
        logger.info("games_loaded", count=len(games))
        return list(games)

    async def search_cards(self, query: str, game: str | None = None) -> list[Card]:
        """Search cards by name; an empty query returns [] without a request."""
        query = (query or "").strip()
        if not query:
            return []

        params = {"q": query}
        if game:
            params["game"] = game

        data = await self._get_data("/cards", params=params)
        if data is None:
            return []

        cards = self._parse(Card, data)
        logger.info("cards_found", query=query, game=game or None, count=len(cards))
        return cards

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> JustTCGClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
