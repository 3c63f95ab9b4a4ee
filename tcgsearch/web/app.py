"""FastAPI web UI for TCG Search."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware
import structlog
from prometheus_fastapi_instrumentator import Instrumentator

from tcgsearch.config import get_config
from tcgsearch.core.logging import configure_logging
from tcgsearch.integration.justtcg_client import JustTCGClient
from tcgsearch.web.routes import health, search

# Initialize structured logging
configure_logging(get_config())
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open one upstream HTTP client for the lifetime of the application."""
    config = get_config()
    app.state.tcg_client = JustTCGClient.from_config(config)
    logger.info("tcg_client_opened", base_url=config.justtcg.base_url)
    try:
        yield
    finally:
        await app.state.tcg_client.close()
        logger.info("tcg_client_closed")


app = FastAPI(
    title="TCG Search",
    description="Search trading card prices without exposing the API key",
    version="1.0.0",
    lifespan=lifespan,
)


# Request Logging Middleware
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        structlog.contextvars.clear_contextvars()

        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        structlog.contextvars.bind_contextvars(request_id=request_id)

        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)

            logger.info(
                "request_completed",
                status_code=response.status_code,
            )
            return response

        except Exception as exc:
            logger.error("request_failed", error=str(exc))
            raise


app.add_middleware(RequestLoggingMiddleware)

# Prometheus Metrics
Instrumentator().instrument(app).expose(app)

# Static assets (search field keyboard handling)
static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")


# Include Routers
app.include_router(health.router)
app.include_router(search.router)
