from __future__ import annotations

from pustaka.catalog.models import CatalogRecord
from pustaka.search.suggestions import search_suggestions


RECORDS = [
    CatalogRecord(id="1", title="Sejarah Sumatra Barat", author="Rusli Amran"),
    CatalogRecord(id="2", title="Sumpah Pemuda", author="Sumarno"),
    CatalogRecord(id="3", title="Sejarah Sumatra", author="Anthony Reid"),
]


def test_suggestions_combine_title_words_and_authors() -> None:
    assert search_suggestions(RECORDS, "sum") == ["sumatra", "sumpah", "Sumarno"]


def test_suggestions_respect_limit() -> None:
    assert search_suggestions(RECORDS, "sum", limit=2) == ["sumatra", "sumpah"]


def test_short_partial_gives_no_suggestions() -> None:
    assert search_suggestions(RECORDS, "s") == []
    assert search_suggestions(RECORDS, None) == []


def test_author_substring_suggests_full_name() -> None:
    assert search_suggestions(RECORDS, "reid") == ["Anthony Reid"]
