"""TCG Search Web Route Modules.

Each module exports a `router` object (APIRouter instance) that
tcgsearch.web.app includes. Shared dependencies live in
tcgsearch.web.dependencies.
"""

from tcgsearch.web.routes import health, search

__all__ = [
    "health",
    "search",
]
