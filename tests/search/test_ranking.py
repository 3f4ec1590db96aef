"""Tests for catalog relevance ranking."""

from __future__ import annotations

import pytest

from pustaka.catalog.models import CatalogRecord, MatchType
from pustaka.search.filters import SearchFilters
from pustaka.search.ranking import query_phrases, query_words, rank, score_record, select_candidates


def _record(record_id: str, title: str, **fields: str) -> CatalogRecord:
    return CatalogRecord(id=record_id, title=title, **fields)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def test_exact_phrase_in_title_outranks_partial_overlap() -> None:
    records = [_record("1", "Sejarah Majapahit"), _record("2", "Novel Majapahit Terjemahan")]

    results = rank(records, "sejarah majapahit")

    assert [result.item.id for result in results] == ["1", "2"]
    assert results[0].score == 195
    assert results[0].match_type is MatchType.EXACT_PHRASE
    assert results[1].score == 50
    assert results[1].match_type is MatchType.KEYWORD


def test_field_weights_for_author_and_publisher() -> None:
    record = _record("1", "X" * 60, author="Sartono Kartodirdjo", publisher="Gramedia Sartono")

    result = score_record(record, "sartono")

    # author: phrase 80 + word 20 + whole word 10; publisher: phrase 60 + word 10
    assert result.score == 180
    assert result.details["phrase_fields"] == ["author", "publisher"]


def test_whole_word_bonus_requires_complete_token() -> None:
    long_tail = " dan Perkembangannya di Kepulauan Nusantara Bagian Barat"
    substring_only = score_record(_record("1", "Jawara" + long_tail), "jawa")
    whole_word = score_record(_record("2", "Jawa" + long_tail), "jawa")

    assert substring_only.score == 100 + 30
    assert whole_word.score == 100 + 30 + 15


def test_short_title_bonus() -> None:
    short = score_record(_record("1", "Babad Tanah Jawi"), "babad")
    long = score_record(_record("2", "Babad Tanah Jawi " + "x" * 40), "babad")

    assert short.score - long.score == 5


# ---------------------------------------------------------------------------
# Candidate selection
# ---------------------------------------------------------------------------

def test_word_union_used_when_few_exact_matches() -> None:
    records = [
        _record("1", "Sejarah Aceh"),
        _record("2", "Perang Aceh"),
        _record("3", "Sejarah Bali"),
        _record("4", "Kamus Jawa"),
    ]

    candidates = select_candidates(records, "sejarah aceh")

    assert [record.id for record in candidates] == ["1", "2", "3"]


def test_exact_phrase_set_used_alone_when_large_enough() -> None:
    records = [_record(str(index), f"Sejarah Aceh jilid {index}") for index in range(8)]
    records.append(_record("other", "Perang Aceh"))

    candidates = select_candidates(records, "sejarah aceh")

    assert len(candidates) == 8
    assert "other" not in {record.id for record in candidates}


def test_exact_threshold_is_configurable() -> None:
    records = [_record("1", "Sejarah Aceh"), _record("2", "Perang Aceh")]

    assert [r.id for r in select_candidates(records, "sejarah aceh", exact_threshold=1)] == ["1"]


def test_query_words_are_deduplicated_in_order() -> None:
    assert query_words("  Sejarah sejarah ACEH ") == ["sejarah", "aceh"]


def test_query_words_drop_edge_punctuation() -> None:
    assert query_words("sejarah, majapahit! (aceh) undang-undang ...") == [
        "sejarah",
        "majapahit",
        "aceh",
        "undang-undang",
    ]


def test_query_phrases_include_punctuation_free_spelling() -> None:
    assert query_phrases("Sejarah, Majapahit") == ("sejarah, majapahit", "sejarah majapahit")
    assert query_phrases("sejarah majapahit") == ("sejarah majapahit",)
    assert query_phrases("?!") == ("?!",)


def test_punctuated_query_scores_like_plain_query() -> None:
    record = _record("1", "Sejarah Majapahit")

    punctuated = score_record(record, "sejarah, majapahit")

    assert punctuated.score == score_record(record, "sejarah majapahit").score == 195
    assert punctuated.match_type is MatchType.EXACT_PHRASE
    assert punctuated.details["matched_words"] == ["sejarah", "majapahit"]


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------

def test_empty_query_returns_nothing() -> None:
    records = [_record("1", "Sejarah Aceh")]
    assert rank(records, "") == []
    assert rank(records, "   ") == []
    assert rank(records, None) == []


def test_no_match_returns_empty_list() -> None:
    assert rank([_record("1", "Sejarah Aceh")], "gamelan") == []


def test_duplicate_records_appear_once() -> None:
    record = _record("1", "Sejarah Aceh")
    duplicate = _record("1", "Sejarah Aceh (salinan)")

    results = rank([record, duplicate, record], "aceh")

    assert [result.item.id for result in results] == ["1"]
    assert results[0].item.title == "Sejarah Aceh"


def test_equal_scores_sort_by_title() -> None:
    records = [_record("1", "Zaman Aceh"), _record("2", "Adat Aceh"), _record("3", "Écrits Aceh")]

    results = rank(records, "aceh")

    assert len({result.score for result in results}) == 1
    assert [result.item.title for result in results] == ["Adat Aceh", "Écrits Aceh", "Zaman Aceh"]


def test_ranking_is_deterministic() -> None:
    records = [_record(str(i), title) for i, title in enumerate(["Sejarah Aceh", "Aceh", "Perang Aceh Besar"])]
    assert rank(records, "aceh") == rank(list(reversed(records)), "aceh")


# ---------------------------------------------------------------------------
# Filters and pagination
# ---------------------------------------------------------------------------

def test_filters_narrow_records_before_ranking() -> None:
    records = [
        _record("1", "Sejarah Aceh", author="Said", year_raw="1961"),
        _record("2", "Sejarah Aceh Modern", author="Reid", year_raw="[2005]"),
        _record("3", "Sejarah Aceh Lama", author="Said", year_raw="s.a."),
    ]

    results = rank(records, "aceh", filters=SearchFilters(author="said", year_from=1950, year_to=1990))

    assert [result.item.id for result in results] == ["1"]


def test_offset_and_limit_page_through_sorted_results() -> None:
    records = [_record(str(i), f"Aceh {chr(ord('a') + i)}") for i in range(5)]

    first_page = rank(records, "aceh", limit=2)
    second_page = rank(records, "aceh", offset=2, limit=2)

    assert [r.item.title for r in first_page] == ["Aceh a", "Aceh b"]
    assert [r.item.title for r in second_page] == ["Aceh c", "Aceh d"]


def test_negative_offset_is_rejected() -> None:
    with pytest.raises(ValueError):
        rank([_record("1", "Aceh")], "aceh", offset=-1)


def test_invalid_year_range_is_rejected() -> None:
    with pytest.raises(ValueError, match="year_from"):
        SearchFilters(year_from=2000, year_to=1900)
