"""Centralised settings for the wikisearch package.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _topics_from_env() -> list[str]:
    raw = os.environ.get("POPULAR_TOPICS", "")
    topics = [t.strip() for t in raw.split(",") if t.strip()]
    return topics or ["Indonesia", "Teknologi", "Sejarah", "Ilmu Pengetahuan", "Budaya"]


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Wikipedia endpoints
    # ------------------------------------------------------------------
    wiki_language: str = field(
        default_factory=lambda: os.environ.get("WIKI_LANGUAGE", "en")
    )
    wiki_api_url_override: str = field(
        default_factory=lambda: os.environ.get("WIKI_API_URL", "")
    )
    wiki_rest_url_override: str = field(
        default_factory=lambda: os.environ.get("WIKI_REST_URL", "")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT",
            "WikiSearch/0.1 (https://github.com/wikisearch; wikisearch@example.com)",
        )
    )

    @property
    def wiki_api_url(self) -> str:
        """Action API endpoint used for full-text search."""
        if self.wiki_api_url_override:
            return self.wiki_api_url_override
        return f"https://{self.wiki_language}.wikipedia.org/w/api.php"

    @property
    def wiki_rest_url(self) -> str:
        """REST v1 base URL used for page summaries (no trailing slash)."""
        if self.wiki_rest_url_override:
            return self.wiki_rest_url_override.rstrip("/")
        return f"https://{self.wiki_language}.wikipedia.org/api/rest_v1"

    # ------------------------------------------------------------------
    # HTTP / fan-out
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "10.0"))
    )
    detail_concurrency: int = field(
        default_factory=lambda: int(os.environ.get("DETAIL_CONCURRENCY", "4"))
    )

    # ------------------------------------------------------------------
    # Result counts
    # ------------------------------------------------------------------
    default_limit: int = field(
        default_factory=lambda: int(os.environ.get("DEFAULT_LIMIT", "10"))
    )
    suggestion_limit: int = field(
        default_factory=lambda: int(os.environ.get("SUGGESTION_LIMIT", "5"))
    )
    popular_limit: int = field(
        default_factory=lambda: int(os.environ.get("POPULAR_LIMIT", "6"))
    )
    popular_topics: list[str] = field(default_factory=_topics_from_env)

    # ------------------------------------------------------------------
    # Display placeholders
    # ------------------------------------------------------------------
    snippet_placeholder: str = "Tidak ada ringkasan tersedia"
    date_placeholder: str = "Tidak diketahui"
    image_placeholder: str = "https://via.placeholder.com/400x300?text=No+Image"


# Module-level singleton; import this everywhere:
#   from wikisearch.config import settings
settings = Settings()
