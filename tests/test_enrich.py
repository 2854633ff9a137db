"""Tests for default substitution and date formatting in ``wikisearch.enrich``."""

from __future__ import annotations

import pytest

from wikisearch.config import settings
from wikisearch.enrich import enrich, format_date
from wikisearch.models import ArticleSummary, SearchHit


_HIT = SearchHit(id=42, title="Borobudur")


class TestFormatDate:
    def test_zulu_timestamp(self) -> None:
        assert format_date("2024-05-01T12:34:56Z") == "1 Mei 2024"

    def test_offset_timestamp(self) -> None:
        assert format_date("2023-12-25T08:00:00+07:00") == "25 Desember 2023"

    def test_date_only(self) -> None:
        assert format_date("2026-10-19") == "19 Oktober 2026"

    @pytest.mark.parametrize("value", [None, "", "not-a-date", 1714560000])
    def test_missing_or_bad_timestamp_uses_placeholder(self, value) -> None:
        assert format_date(value) == "Tidak diketahui"


class TestEnrich:
    def test_full_summary_passes_through(self) -> None:
        summary = ArticleSummary(
            title="Borobudur",
            extract="A 9th-century temple.",
            thumbnail_url="https://img/borobudur.jpg",
            last_modified="2024-01-15T00:00:00Z",
            extract_html="<p>A <b>9th-century</b> temple.</p>",
        )
        result = enrich(_HIT, summary)

        assert result.id == 42
        assert result.title == "Borobudur"
        assert result.snippet == "A 9th-century temple."
        assert result.image_url == "https://img/borobudur.jpg"
        assert result.display_date == "15 Januari 2024"
        assert result.full_content_html == "<p>A <b>9th-century</b> temple.</p>"

    def test_missing_extract_uses_snippet_placeholder(self) -> None:
        result = enrich(_HIT, ArticleSummary(title="Borobudur"))

        assert result.snippet == "Tidak ada ringkasan tersedia"
        assert result.full_content_html == "<p>Tidak ada ringkasan tersedia</p>"

    def test_missing_thumbnail_uses_placeholder_image(self) -> None:
        result = enrich(_HIT, ArticleSummary(title="Borobudur", extract="x"))
        assert result.image_url == settings.image_placeholder

    def test_missing_timestamp_uses_date_placeholder(self) -> None:
        result = enrich(_HIT, ArticleSummary(title="Borobudur", extract="x"))
        assert result.display_date == settings.date_placeholder

    def test_missing_extract_html_wraps_extract(self) -> None:
        result = enrich(_HIT, ArticleSummary(title="Borobudur", extract="Temple & shrine"))
        assert result.full_content_html == "<p>Temple &amp; shrine</p>"

    def test_empty_summary_title_falls_back_to_hit_title(self) -> None:
        result = enrich(_HIT, ArticleSummary(title=""))
        assert result.title == "Borobudur"

    def test_every_field_populated(self) -> None:
        result = enrich(_HIT, ArticleSummary(title="Borobudur"))
        assert all(value not in (None, "") for value in result.to_dict().values())
