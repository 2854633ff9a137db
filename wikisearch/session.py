"""View state for one search front-end (a terminal session, a browser tab).

A :class:`SearchSession` owns everything the page shows: the result cards,
the loading / empty / error state, the type-ahead suggestions and the open
article.  It is built around an injected :class:`SearchOrchestrator`; nothing
here is module-level, so several sessions can coexist.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Literal

from wikisearch.config import settings
from wikisearch.errors import SearchUnavailable
from wikisearch.models import EnrichedResult
from wikisearch.orchestrator import SearchOrchestrator

Status = Literal["idle", "loading", "results", "empty", "error"]

EMPTY_MESSAGE = "Tidak ada hasil ditemukan untuk pencarian Anda."
EMPTY_HINT = "Coba gunakan kata kunci yang berbeda atau lebih spesifik"
ERROR_MESSAGE = "Terjadi kesalahan saat mencari. Silakan coba lagi."


@dataclass
class SearchSession:
    orchestrator: SearchOrchestrator
    status: Status = "idle"
    query: str = ""
    results: list[EnrichedResult] = field(default_factory=list)
    message: str = ""
    suggestions: list[str] = field(default_factory=list)
    suggestions_visible: bool = False
    selected: EnrichedResult | None = None
    topic: str | None = None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def perform_search(self, query: str, limit: int | None = None) -> None:
        """Search for *query* and move to the results, empty or error state.

        A blank query is ignored and leaves the state untouched.  *limit*
        defaults to ``settings.default_limit``.
        """
        query = query.strip()
        if not query:
            return

        self.query = query
        self.status = "loading"
        self.results = []
        self.message = ""
        try:
            results = self.orchestrator.search(query, limit or settings.default_limit)
        except SearchUnavailable as exc:
            print(f"[session] Error searching Wikipedia: {exc}")
            self.status = "error"
            self.message = ERROR_MESSAGE
            return
        self._show_results(results)

    def show_suggestions(self, query: str) -> None:
        """Refresh the type-ahead list for *query*.

        Failures are logged and leave the list hidden; they never put the
        session into the error state.
        """
        query = query.strip()
        if not query:
            self.suggestions_visible = False
            return

        try:
            results = self.orchestrator.search(query, settings.suggestion_limit)
        except SearchUnavailable as exc:
            print(f"[session] Error fetching suggestions: {exc}")
            self.suggestions_visible = False
            return
        self.suggestions = [r.title for r in results]
        self.suggestions_visible = True

    def choose_suggestion(self, title: str) -> None:
        self.suggestions_visible = False
        self.perform_search(title)

    def load_popular(self, rng: random.Random | None = None) -> None:
        """Show results for a random popular topic, as on first page load."""
        topic = (rng or random).choice(settings.popular_topics)
        self.topic = topic
        try:
            results = self.orchestrator.search(topic, settings.popular_limit)
        except SearchUnavailable as exc:
            print(f"[session] Error loading popular articles: {exc}")
            return
        self.query = topic
        if not results:
            print(f"[session] No popular articles for {topic!r}.")
            return
        self._show_results(results)

    # ------------------------------------------------------------------
    # Article view
    # ------------------------------------------------------------------

    def open_article(self, result: EnrichedResult) -> None:
        self.selected = result

    def close_article(self) -> None:
        self.selected = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _show_results(self, results: list[EnrichedResult]) -> None:
        self.results = results
        if results:
            self.status = "results"
            self.message = ""
        else:
            self.status = "empty"
            self.message = EMPTY_MESSAGE
