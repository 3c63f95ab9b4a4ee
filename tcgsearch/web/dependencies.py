"""Shared dependencies for TCG Search web routes.

Dependencies are injected using FastAPI's Depends() system.

Usage:
    from fastapi import Depends
    from tcgsearch.web.dependencies import get_templates, get_tcg_client

    @router.get("/page")
    async def page(
        request: Request,
        client = Depends(get_tcg_client),
        templates = Depends(get_templates),
    ):
        return templates.TemplateResponse(request, "page.html", {...})
"""

from __future__ import annotations

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from tcgsearch.integration.justtcg_client import JustTCGClient

# Global singleton for templates
_templates: Jinja2Templates | None = None


def get_templates() -> Jinja2Templates:
    """Get Jinja2Templates instance for rendering HTML templates.

    This is a singleton - the templates directory is only initialized once.

    Returns:
        Jinja2Templates instance configured with tcgsearch/web/templates/.
    """
    global _templates
    if _templates is None:
        _templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    return _templates


def get_tcg_client(request: Request) -> JustTCGClient:
    """Return the application-wide JustTCG client opened in the app lifespan."""
    return request.app.state.tcg_client
