"""HTTP client for the two Wikipedia endpoints the pipeline consumes.

``search_hits`` hits the Action API (``list=search``) and ``summary`` hits the
REST v1 ``page/summary`` route.  Both share one ``httpx.Client`` so that
connections are pooled across the per-hit summary fan-out.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from wikisearch.config import settings
from wikisearch.errors import SearchUnavailable, SummaryUnavailable
from wikisearch.models import ArticleSummary, SearchHit


def _parse_hits(data: Any) -> list[SearchHit]:
    """Return the hits found under ``query.search``; ``[]`` when the path is missing."""
    if not isinstance(data, dict):
        return []
    items = (data.get("query") or {}).get("search") or []
    hits: list[SearchHit] = []
    for item in items:
        pageid = item.get("pageid")
        title = item.get("title")
        if pageid is None or not title:
            continue
        hits.append(SearchHit(id=int(pageid), title=title))
    return hits


def _parse_summary(data: dict[str, Any], requested_title: str) -> ArticleSummary:
    thumbnail = data.get("thumbnail") or {}
    return ArticleSummary(
        title=data.get("title") or requested_title,
        extract=data.get("extract") or None,
        thumbnail_url=thumbnail.get("source") or None,
        last_modified=data.get("timestamp") or None,
        extract_html=data.get("extract_html") or None,
    )


class WikipediaClient:
    """Thin wrapper over ``httpx.Client`` for search and summary lookups.

    The instance owns its ``httpx.Client`` unless one is passed in.  Use it as
    a context manager or call :meth:`close` when done.
    """

    def __init__(
        self,
        http: httpx.Client | None = None,
        api_url: str | None = None,
        rest_url: str | None = None,
    ) -> None:
        self._owns_http = http is None
        self._http = http or httpx.Client(
            headers={
                "User-Agent": settings.user_agent,
                "Accept": "application/json",
            },
            timeout=settings.request_timeout,
            follow_redirects=True,
        )
        self.api_url = api_url or settings.wiki_api_url
        self.rest_url = (rest_url or settings.wiki_rest_url).rstrip("/")

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def search_hits(self, query: str, limit: int) -> list[SearchHit]:
        """Run a full-text search and return up to *limit* hits.

        Raises:
            SearchUnavailable: On transport errors, non-2xx responses, or a
                body that is not JSON.
        """
        try:
            resp = self._http.get(
                self.api_url,
                params={
                    "action": "query",
                    "list": "search",
                    "srsearch": query,
                    "srlimit": limit,
                    "format": "json",
                },
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise SearchUnavailable(
                f"search for {query!r} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SearchUnavailable(f"search for {query!r} failed: {exc}") from exc
        except ValueError as exc:
            raise SearchUnavailable(f"search for {query!r} returned invalid JSON") from exc

        return _parse_hits(data)

    def summary(self, title: str) -> ArticleSummary:
        """Fetch the summary record for the article called *title*.

        Raises:
            SummaryUnavailable: On transport errors, non-2xx responses (e.g.
                a title with no summary), or a body that is not JSON.
        """
        url = f"{self.rest_url}/page/summary/{quote(title, safe='')}"
        try:
            resp = self._http.get(url)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise SummaryUnavailable(
                f"HTTP {exc.response.status_code} for {title!r}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SummaryUnavailable(f"request for {title!r} failed: {exc}") from exc
        except ValueError as exc:
            raise SummaryUnavailable(f"invalid JSON for {title!r}") from exc

        if not isinstance(data, dict):
            raise SummaryUnavailable(f"unexpected summary payload for {title!r}")
        return _parse_summary(data, title)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> WikipediaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
