"""Wikipedia search front-end: search, enrich, and present article cards.

Public API::

    from wikisearch import build_default_orchestrator
    results = build_default_orchestrator().search("Indonesia", limit=6)
"""

from wikisearch.errors import SearchUnavailable, SummaryUnavailable, WikiSearchError
from wikisearch.models import ArticleSummary, DroppedHit, EnrichedResult, SearchHit
from wikisearch.orchestrator import SearchOrchestrator, build_default_orchestrator
from wikisearch.session import SearchSession

__all__ = [
    "ArticleSummary",
    "DroppedHit",
    "EnrichedResult",
    "SearchHit",
    "SearchOrchestrator",
    "SearchSession",
    "SearchUnavailable",
    "SummaryUnavailable",
    "WikiSearchError",
    "build_default_orchestrator",
]
