"""Search endpoints.

Routes
------
GET /search?q=<query>&limit=10       Result cards for a query
GET /search/suggestions?q=<query>    Type-ahead titles
GET /search/popular                  Cards for a random popular topic

Every handler builds a fresh :class:`SearchSession` around the shared
orchestrator, so no view state leaks between requests.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel

from wikisearch.session import SearchSession

router = APIRouter()


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class ResultResponse(BaseModel):
    id: int
    title: str
    snippet: str
    image_url: str
    display_date: str
    full_content_html: str


class SearchPageResponse(BaseModel):
    status: str
    message: str
    query: str
    topic: Optional[str] = None
    results: list[ResultResponse]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _session(request: Request) -> SearchSession:
    return SearchSession(orchestrator=request.app.state.orchestrator)


def _page(session: SearchSession) -> dict[str, Any]:
    return {
        "status": session.status,
        "message": session.message,
        "query": session.query,
        "topic": session.topic,
        "results": [r.to_dict() for r in session.results],
    }


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("", response_model=SearchPageResponse)
def search(
    request: Request,
    q: str,
    limit: int = Query(10, ge=1, le=50),
) -> dict[str, Any]:
    """Search Wikipedia and return the result page.

    Args:
        q: Free-text query; must not be blank.
        limit: Maximum number of search hits to enrich.
    """
    if not q.strip():
        raise HTTPException(status_code=400, detail="Query must not be blank.")

    session = _session(request)
    session.perform_search(q, limit=limit)
    if session.status == "error":
        raise HTTPException(status_code=503, detail=session.message)
    return _page(session)


@router.get("/suggestions", response_model=list[str])
def suggestions(request: Request, q: str = "") -> list[str]:
    """Return type-ahead titles for *q*; empty when blank or on failure."""
    session = _session(request)
    session.show_suggestions(q)
    if not session.suggestions_visible:
        return []
    return session.suggestions


@router.get("/popular", response_model=SearchPageResponse)
def popular(request: Request) -> dict[str, Any]:
    """Return cards for a randomly chosen popular topic."""
    session = _session(request)
    session.load_popular()
    return _page(session)
