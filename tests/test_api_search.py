"""Tests for the /search API endpoints.

The app is built with an injected orchestrator whose lookups are fakes, so
no ``WikipediaClient`` is opened and no network calls are made.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from wikisearch.api.app import create_app
from wikisearch.config import settings
from wikisearch.errors import SearchUnavailable, SummaryUnavailable
from wikisearch.models import ArticleSummary, SearchHit
from wikisearch.orchestrator import SearchOrchestrator


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_HITS = [SearchHit(1, "Indonesia"), SearchHit(2, "Jakarta"), SearchHit(3, "Missing")]


def _detail(title: str) -> ArticleSummary:
    if title == "Missing":
        raise SummaryUnavailable("HTTP 404")
    return ArticleSummary(title=title, extract=f"About {title}.")


def _client_for(search_lookup) -> TestClient:
    orch = SearchOrchestrator(search_lookup, _detail, concurrency=1)
    return TestClient(create_app(orchestrator=orch), raise_server_exceptions=True)


@pytest.fixture()
def calls() -> list[tuple[str, int]]:
    return []


@pytest.fixture()
def client(calls):

    def search_lookup(query: str, limit: int) -> list[SearchHit]:
        calls.append((query, limit))
        if query == "kosong":
            return []
        return _HITS[:limit]

    with _client_for(search_lookup) as c:
        yield c


@pytest.fixture()
def down_client():
    def search_lookup(query: str, limit: int) -> list[SearchHit]:
        raise SearchUnavailable("HTTP 503")

    with _client_for(search_lookup) as c:
        yield c


# ---------------------------------------------------------------------------
# GET /search
# ---------------------------------------------------------------------------

class TestSearchEndpoint:
    def test_returns_enriched_results(self, client) -> None:
        resp = client.get("/search", params={"q": "Indonesia"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "results"
        assert data["query"] == "Indonesia"
        assert [r["title"] for r in data["results"]] == ["Indonesia", "Jakarta"]
        first = data["results"][0]
        assert first["snippet"] == "About Indonesia."
        assert first["image_url"] == settings.image_placeholder
        assert first["display_date"] == settings.date_placeholder
        assert first["full_content_html"] == "<p>About Indonesia.</p>"

    def test_limit_forwarded(self, client, calls) -> None:
        client.get("/search", params={"q": "Indonesia", "limit": 2})
        assert calls == [("Indonesia", 2)]

    def test_empty_results(self, client) -> None:
        resp = client.get("/search", params={"q": "kosong"})

        assert resp.status_code == 200
        assert resp.json()["status"] == "empty"
        assert resp.json()["results"] == []

    def test_blank_query_rejected(self, client, calls) -> None:
        resp = client.get("/search", params={"q": "   "})
        assert resp.status_code == 400
        assert calls == []

    def test_missing_query_rejected(self, client) -> None:
        assert client.get("/search").status_code == 422

    @pytest.mark.parametrize("limit", [0, 51])
    def test_limit_out_of_range(self, client, limit) -> None:
        resp = client.get("/search", params={"q": "Indonesia", "limit": limit})
        assert resp.status_code == 422

    def test_search_unavailable_is_503(self, down_client) -> None:
        resp = down_client.get("/search", params={"q": "Indonesia"})
        assert resp.status_code == 503


# ---------------------------------------------------------------------------
# GET /search/suggestions
# ---------------------------------------------------------------------------

class TestSuggestionsEndpoint:
    def test_returns_titles(self, client, calls) -> None:
        resp = client.get("/search/suggestions", params={"q": "Indo"})

        assert resp.status_code == 200
        assert resp.json() == ["Indonesia", "Jakarta"]
        assert calls == [("Indo", settings.suggestion_limit)]

    def test_blank_query_returns_empty(self, client, calls) -> None:
        assert client.get("/search/suggestions").json() == []
        assert calls == []

    def test_failure_returns_empty(self, down_client) -> None:
        resp = down_client.get("/search/suggestions", params={"q": "Indo"})
        assert resp.status_code == 200
        assert resp.json() == []


# ---------------------------------------------------------------------------
# GET /search/popular
# ---------------------------------------------------------------------------

class TestPopularEndpoint:
    def test_returns_topic_and_results(self, client, calls) -> None:
        resp = client.get("/search/popular")

        assert resp.status_code == 200
        data = resp.json()
        assert data["topic"] in settings.popular_topics
        assert data["status"] == "results"
        assert calls == [(data["topic"], settings.popular_limit)]

    def test_failure_returns_idle_page(self, down_client) -> None:
        data = down_client.get("/search/popular").json()
        assert data["status"] == "idle"
        assert data["results"] == []
