"""Turn a hit plus its summary into a displayable :class:`EnrichedResult`."""

from __future__ import annotations

import html
from datetime import datetime

from wikisearch.config import settings
from wikisearch.models import ArticleSummary, EnrichedResult, SearchHit

_ID_MONTHS = [
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
]


def format_date(timestamp: object) -> str:
    """Render an ISO-8601 timestamp as an ``id-ID`` long date.

    ``"2024-05-01T12:00:00Z"`` becomes ``"1 Mei 2024"``.  Missing, non-string
    or unparsable timestamps yield ``settings.date_placeholder``.
    """
    if not isinstance(timestamp, str) or not timestamp:
        return settings.date_placeholder
    raw = timestamp.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return settings.date_placeholder
    return f"{parsed.day} {_ID_MONTHS[parsed.month - 1]} {parsed.year}"


def wrap_paragraph(text: str) -> str:
    return f"<p>{html.escape(text, quote=False)}</p>"


def enrich(hit: SearchHit, summary: ArticleSummary) -> EnrichedResult:
    """Merge *hit* and *summary*, substituting placeholders for missing fields."""
    snippet = summary.extract or settings.snippet_placeholder
    return EnrichedResult(
        id=hit.id,
        title=summary.title or hit.title,
        snippet=snippet,
        image_url=summary.thumbnail_url or settings.image_placeholder,
        display_date=format_date(summary.last_modified),
        full_content_html=summary.extract_html or wrap_paragraph(snippet),
    )
