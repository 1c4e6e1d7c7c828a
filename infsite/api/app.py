"""FastAPI application factory.

Lifespan
--------
On startup the app logs whether the summarizer is configured (AI tier) or
whether every analysis will be synthesized locally (basic tier).

Routers
-------
All endpoint groups are mounted under ``/api``:

    /api/analyze  — fetch a page and describe the site
    /api/health   — liveness probe

Static assets are served from ``settings.static_dir`` at ``/`` when that
directory exists.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from infsite.config import Settings, settings as default_settings
from infsite.errors import MissingUrlError

from infsite.api.routers import analyze as analyze_router
from infsite.api.routers import health as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Report the analysis tier the server will run with."""
    settings: Settings = app.state.settings
    if settings.has_summarizer:
        logger.info("Summarizer configured (model=%s)", settings.anthropic_model)
    else:
        logger.info("ANTHROPIC_API_KEY not set; serving basic analysis only")
    yield


async def _invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies with the ``{"error": ...}`` shape."""
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": MissingUrlError.message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    settings = settings or default_settings

    app = FastAPI(
        title="InfSite API",
        description=(
            "Fetches a web page server-side, extracts its salient content and "
            "returns a structured description of the site, summarized by a "
            "language model when one is configured."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Allow browser frontends on any origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[analyze_router.TIER_HEADER],
    )
    app.add_exception_handler(RequestValidationError, _invalid_body_handler)

    app.include_router(analyze_router.router, prefix="/api", tags=["analyze"])
    app.include_router(health_router.router, prefix="/api", tags=["health"])

    # Mounted last so the API routes take precedence over static files.
    if settings.static_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    return app


# Module-level instance used by uvicorn:
#   uvicorn infsite.api.app:app --reload
app = create_app()
