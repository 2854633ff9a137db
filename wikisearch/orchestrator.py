"""Search orchestration: one search lookup, then a summary lookup per hit.

``SearchOrchestrator.search`` is the single operation the outer layers (CLI,
HTTP API, :class:`~wikisearch.session.SearchSession`) call.  The two lookups
are injected callables so tests can substitute fakes without any HTTP
mocking:

    search_lookup(query, limit) -> list[SearchHit]
    detail_lookup(title)        -> ArticleSummary

Failure policy
--------------
* The search lookup failing fails the whole call with
  :class:`~wikisearch.errors.SearchUnavailable`.
* A summary lookup failing, or its summary failing to enrich, drops that
  hit only.  The drop is printed and
  reported to the ``on_drop`` hook as a :class:`~wikisearch.models.DroppedHit`.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable

from wikisearch.client import WikipediaClient
from wikisearch.config import settings
from wikisearch.enrich import enrich
from wikisearch.errors import SearchUnavailable
from wikisearch.models import ArticleSummary, DroppedHit, EnrichedResult, SearchHit

SearchLookup = Callable[[str, int], list[SearchHit]]
DetailLookup = Callable[[str], ArticleSummary]
DropHook = Callable[[DroppedHit], None]


class SearchOrchestrator:
    """Combine search hits with their summaries into ordered result cards.

    Args:
        search_lookup: Returns the hits for ``(query, limit)``.
        detail_lookup: Returns the summary for an article title.
        on_drop: Called once per hit dropped because its summary lookup
            failed or the summary could not be turned into a result.
        concurrency: Maximum number of summary lookups in flight.  ``1``
            fetches strictly one at a time in hit order.  Defaults to
            ``settings.detail_concurrency``.
    """

    def __init__(
        self,
        search_lookup: SearchLookup,
        detail_lookup: DetailLookup,
        on_drop: DropHook | None = None,
        concurrency: int | None = None,
    ) -> None:
        self._search_lookup = search_lookup
        self._detail_lookup = detail_lookup
        self._on_drop = on_drop
        self._concurrency = max(
            1, settings.detail_concurrency if concurrency is None else concurrency
        )

    def search(self, query: str, limit: int = 10) -> list[EnrichedResult]:
        """Return enriched results for *query*, in search-hit order.

        Hits whose summary lookup fails are left out; the call itself only
        fails when the search lookup does.

        Raises:
            ValueError: If *limit* is not a positive integer.
            SearchUnavailable: If the search lookup fails.
        """
        if limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        try:
            hits = self._search_lookup(query, limit)
        except SearchUnavailable:
            print(f"[search] ✗ Search lookup failed for {query!r}.")
            raise
        except Exception as exc:
            print(f"[search] ✗ Search lookup failed for {query!r}: {exc}")
            raise SearchUnavailable(f"search for {query!r} failed: {exc}") from exc

        if not hits:
            print(f"[search] No hits for {query!r}.")
            return []

        print(f"[search] ✓ {len(hits)} hit(s) for {query!r}; fetching summaries …")
        enriched: list[EnrichedResult | None] = [None] * len(hits)

        with ThreadPoolExecutor(max_workers=min(self._concurrency, len(hits))) as pool:
            future_to_index = {
                pool.submit(self._detail_lookup, hit.title): index
                for index, hit in enumerate(hits)
            }
            for future in as_completed(future_to_index):
                index = future_to_index[future]
                hit = hits[index]
                try:
                    enriched[index] = enrich(hit, future.result())
                except Exception as exc:
                    self._drop(hit, exc)

        results = [r for r in enriched if r is not None]
        print(f"[search] {len(results)}/{len(hits)} result(s) ready for {query!r}.")
        return results

    def _drop(self, hit: SearchHit, exc: Exception) -> None:
        reason = str(exc) or type(exc).__name__
        print(f"[search] ✗ Dropped {hit.title!r}: {reason}")
        if self._on_drop is not None:
            self._on_drop(DroppedHit(hit=hit, reason=reason, error=exc))


# ---------------------------------------------------------------------------
# Default factory
# ---------------------------------------------------------------------------

def build_default_orchestrator(
    client: WikipediaClient | None = None,
    on_drop: DropHook | None = None,
) -> SearchOrchestrator:
    """Wire a :class:`SearchOrchestrator` to a :class:`WikipediaClient`."""
    client = client or WikipediaClient()
    return SearchOrchestrator(
        search_lookup=client.search_hits,
        detail_lookup=client.summary,
        on_drop=on_drop,
    )
