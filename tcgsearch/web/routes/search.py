"""Card search page.

Routes:
- GET  /   - Search form and results grid (query params: q, game)
"""

from __future__ import annotations

import asyncio

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from tcgsearch.config import AppConfig, get_config
from tcgsearch.formatting import present_cards
from tcgsearch.integration.justtcg_client import JustTCGClient
from tcgsearch.web.dependencies import get_tcg_client, get_templates

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["search"])


@router.get("/", response_class=HTMLResponse)
async def search_page(
    request: Request,
    q: str | None = Query(default=None),
    game: str | None = Query(default=None),
    client: JustTCGClient = Depends(get_tcg_client),
    config: AppConfig = Depends(get_config),
    templates=Depends(get_templates),
):
    """Render the search form and, when q is set, the matching cards.

    The games list and the card search are fetched in parallel; either one
    failing renders as an empty list.
    """
    query = (q or "").strip()
    game_slug = (game or "").strip()

    games, cards = await asyncio.gather(
        client.get_games(),
        client.search_cards(query, game_slug or None),
    )

    logger.info("search_rendered", query=query or None, game=game_slug or None, results=len(cards))

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "query": query,
            "game": game_slug,
            "games": games,
            "cards": present_cards(cards, config.tcgplayer_product_url),
        },
    )
