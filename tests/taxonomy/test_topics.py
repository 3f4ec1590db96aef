"""Tests for title topic extraction."""

from __future__ import annotations

import pytest

from pustaka.errors import ClassificationError
from pustaka.taxonomy import topics as topics_module
from pustaka.taxonomy.topics import DEFAULT_TOPIC, extract_topics, load_thesaurus, match_topics


# ---------------------------------------------------------------------------
# Dictionary matching
# ---------------------------------------------------------------------------

def test_topics_follow_dictionary_order() -> None:
    assert extract_topics("Hukum Adat dan Ekonomi Daerah") == ["hukum", "ekonomi"]


def test_topics_are_capped_at_three() -> None:
    title = "Sejarah Hukum, Budaya, Agama dan Bahasa di Nusantara"
    assert extract_topics(title) == ["sejarah", "hukum", "budaya"]


def test_multilingual_keywords_map_to_the_same_topic() -> None:
    assert extract_topics("Geschiedenis van Java") == ["sejarah"]
    assert extract_topics("A History of Java") == ["sejarah"]


# ---------------------------------------------------------------------------
# Contextual heuristics and default
# ---------------------------------------------------------------------------

def test_geographic_names_imply_culture_and_history() -> None:
    assert extract_topics("Perjalanan ke Pulau Lombok") == ["budaya", "sejarah"]


def test_government_words_imply_politics() -> None:
    assert extract_topics("Dewan Perwakilan") == ["politik"]


def test_unmatched_title_falls_back_to_default() -> None:
    assert extract_topics("Kumpulan Resep Kue") == [DEFAULT_TOPIC]


@pytest.mark.parametrize("title", [None, "", "   ", 42, ["sejarah"]])
def test_malformed_titles_yield_default_topic(title: object) -> None:
    assert extract_topics(title) == [DEFAULT_TOPIC]  # type: ignore[arg-type]


def test_match_topics_rejects_non_text() -> None:
    with pytest.raises(ClassificationError):
        match_topics(42)  # type: ignore[arg-type]


def test_extraction_failure_is_logged_and_defaulted(monkeypatch, caplog) -> None:
    def _boom(*args: object, **kwargs: object) -> list[str]:
        raise ClassificationError("broken thesaurus")

    monkeypatch.setattr(topics_module, "match_topics", _boom)

    assert extract_topics("Sejarah Jawa") == [DEFAULT_TOPIC]
    assert "Topic extraction failed" in caplog.text


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "title",
    [
        "Sejarah Kota Padang",
        "Serat Centhini",
        "Kamus Bahasa Belanda - Indonesia",
        "Ilmu Pengetahuan, Teknologi, Kesehatan, Pertanian dan Militer",
        "x",
    ],
)
def test_topic_count_is_between_one_and_three(title: str) -> None:
    result = extract_topics(title)
    assert 1 <= len(result) <= 3
    assert extract_topics(title) == result


def test_thesaurus_is_loaded_once() -> None:
    assert load_thesaurus() is load_thesaurus()
    assert len(load_thesaurus().categories) == 17
