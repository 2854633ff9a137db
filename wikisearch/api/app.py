"""FastAPI application factory.

Lifespan
--------
On startup the app opens a single :class:`WikipediaClient` (its connection
pool is shared across all requests) and builds the orchestrator on
``request.app.state.orchestrator``.  On shutdown the client is closed.

An orchestrator passed to :func:`create_app` is used as-is and no client is
opened; tests rely on this to inject fakes.

Routers
-------
    /search  result cards, suggestions, popular topic
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wikisearch.client import WikipediaClient
from wikisearch.orchestrator import SearchOrchestrator, build_default_orchestrator

from wikisearch.api.routers import search as search_router


def create_app(orchestrator: SearchOrchestrator | None = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if orchestrator is not None:
            app.state.orchestrator = orchestrator
            yield
            return

        client = WikipediaClient()
        app.state.orchestrator = build_default_orchestrator(client)
        try:
            yield
        finally:
            client.close()

    app = FastAPI(
        title="WikiSearch API",
        description=(
            "Searches Wikipedia and returns enriched result cards, "
            "type-ahead suggestions and a popular-topic landing page."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(search_router.router, prefix="/search", tags=["search"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn wikisearch.api.app:app --reload
app = create_app()
