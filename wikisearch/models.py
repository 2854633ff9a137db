"""Data models for the search pipeline.

All models are frozen dataclasses: each one is built once and handed to the
caller unchanged.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SearchHit:
    """A page id / title pair returned by the search lookup."""

    id: int
    title: str


@dataclass(frozen=True)
class ArticleSummary:
    """The summary record for one article.  Every field but ``title`` is optional."""

    title: str
    extract: str | None = None
    thumbnail_url: str | None = None
    last_modified: str | None = None
    extract_html: str | None = None


@dataclass(frozen=True)
class EnrichedResult:
    """A displayable result card.  No field is ever empty."""

    id: int
    title: str
    snippet: str
    image_url: str
    display_date: str
    full_content_html: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DroppedHit:
    """Diagnostic record for a hit whose summary lookup failed."""

    hit: SearchHit
    reason: str
    error: Exception
