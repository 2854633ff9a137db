"""Utilities for rendering result cards and articles in the terminal."""

from __future__ import annotations

import textwrap

from bs4 import BeautifulSoup

from wikisearch.models import EnrichedResult

_WIDTH = 78


def html_to_text(html: str) -> str:
    """Return the readable text of an article's HTML, one paragraph per block.

    Scripts and styles are stripped; paragraphs are separated by blank lines.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()

    paragraphs = [
        p.get_text(" ", strip=True) for p in soup.find_all(["p", "li", "h2", "h3"])
    ]
    paragraphs = [p for p in paragraphs if p]
    if not paragraphs:
        text = soup.get_text(" ", strip=True)
        return text
    return "\n\n".join(paragraphs)


def render_card(result: EnrichedResult, rank: int) -> str:
    """Render one result card: title, wrapped snippet, update date, image."""
    snippet = textwrap.fill(
        result.snippet,
        width=_WIDTH,
        initial_indent="    ",
        subsequent_indent="    ",
        max_lines=4,
        placeholder=" …",
    )
    return "\n".join(
        [
            f"[{rank}] {result.title}",
            snippet,
            f"    📅 Diperbarui: {result.display_date}",
            f"    🖼️  {result.image_url}",
        ]
    )


def render_cards(results: list[EnrichedResult]) -> str:
    return "\n\n".join(render_card(r, i) for i, r in enumerate(results, start=1))


def render_article(result: EnrichedResult) -> str:
    """Render the full article view (title, date, image, body text)."""
    body = "\n\n".join(
        textwrap.fill(para, width=_WIDTH) for para in html_to_text(result.full_content_html).split("\n\n")
    )
    rule = "=" * _WIDTH
    return "\n".join(
        [
            rule,
            result.title,
            f"📅 {result.display_date}",
            f"🖼️  {result.image_url}",
            rule,
            "",
            body,
        ]
    )
