"""Field-weighted, phrase-aware relevance ranking for catalog records.

Ranking runs in two phases.  Records containing the whole query in the
title, author or publisher are collected first; when there are enough of
them they form the candidate set on their own, otherwise records matching
any single query word are added.  Every candidate is then scored with the
same field weights, deduplicated by id and sorted by score with a
deterministic title tie-break.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pustaka.catalog.models import CatalogRecord, MatchType, ScoredResult
from pustaka.search.filters import SearchFilters
from pustaka.text.normalize import fold_for_sort, lowercase, normalize


DEFAULT_EXACT_MATCH_THRESHOLD = 8
SHORT_TITLE_LENGTH = 50

PHRASE_WEIGHTS = {"title": 100, "author": 80, "publisher": 60}
WORD_WEIGHTS = {"title": 30, "author": 20, "publisher": 10}
WHOLE_WORD_WEIGHTS = {"title": 15, "author": 10}
SHORT_TITLE_BONUS = 5

_EDGE_PUNCTUATION_RE = re.compile(r"^\W+|\W+$")


@dataclass(frozen=True, slots=True)
class _SearchableRecord:
    record: CatalogRecord
    fields: dict[str, str]
    tokens: dict[str, frozenset[str]]

    @classmethod
    def of(cls, record: CatalogRecord) -> "_SearchableRecord":
        fields = {
            "title": lowercase(record.title),
            "author": lowercase(record.author),
            "publisher": lowercase(record.publisher),
        }
        tokens = {name: frozenset(normalize(fields[name])) for name in WHOLE_WORD_WEIGHTS}
        return cls(record=record, fields=fields, tokens=tokens)

    def contains(self, needle: str) -> bool:
        return any(needle in value for value in self.fields.values())


def _split_words(query: str | None) -> list[str]:
    words = (_EDGE_PUNCTUATION_RE.sub("", word) for word in lowercase(query).split())
    return [word for word in words if word]


def query_words(query: str | None) -> list[str]:
    """Lowercased query words without edge punctuation, first occurrence kept."""
    return list(dict.fromkeys(_split_words(query)))


def query_phrases(query: str | None) -> tuple[str, ...]:
    """The lowercased query as typed, plus its punctuation-free spelling when that differs."""
    candidates = (lowercase(query), " ".join(_split_words(query)))
    return tuple(dict.fromkeys(phrase for phrase in candidates if phrase))


def _dedupe(records: Iterable[CatalogRecord]) -> list[CatalogRecord]:
    seen: set[str] = set()
    unique: list[CatalogRecord] = []
    for record in records:
        if record.id in seen:
            continue
        seen.add(record.id)
        unique.append(record)
    return unique


def select_candidates(
    records: Sequence[CatalogRecord],
    query: str,
    *,
    exact_threshold: int = DEFAULT_EXACT_MATCH_THRESHOLD,
) -> list[CatalogRecord]:
    """Return the candidate set for *query* (exact-phrase pass, then word union)."""

    phrases = query_phrases(query)
    if not phrases:
        return []

    searchable = [_SearchableRecord.of(record) for record in _dedupe(records)]
    exact = [item.record for item in searchable if any(item.contains(phrase) for phrase in phrases)]
    if len(exact) >= exact_threshold:
        return exact

    words = query_words(query)
    exact_ids = {record.id for record in exact}
    union = [
        item.record
        for item in searchable
        if item.record.id not in exact_ids and any(item.contains(word) for word in words)
    ]
    return exact + union


def score_record(record: CatalogRecord, query: str) -> ScoredResult[CatalogRecord]:
    """Score one record against *query* using the field weights above."""

    item = _SearchableRecord.of(record)
    phrases = query_phrases(query)
    words = query_words(query)

    score = 0
    phrase_fields = [name for name, value in item.fields.items() if any(phrase in value for phrase in phrases)]
    for name in phrase_fields:
        score += PHRASE_WEIGHTS[name]

    matched_words: list[str] = []
    for word in words:
        word_hit = False
        for name, weight in WORD_WEIGHTS.items():
            if word in item.fields[name]:
                score += weight
                word_hit = True
        for name, weight in WHOLE_WORD_WEIGHTS.items():
            if word in item.tokens[name]:
                score += weight
        if word_hit:
            matched_words.append(word)

    if len(record.title) < SHORT_TITLE_LENGTH:
        score += SHORT_TITLE_BONUS

    return ScoredResult(
        item=record,
        score=score,
        match_type=MatchType.EXACT_PHRASE if phrase_fields else MatchType.KEYWORD,
        details={"phrase_fields": phrase_fields, "matched_words": matched_words},
    )


def _sort_key(result: ScoredResult[CatalogRecord]) -> tuple[float, str, str]:
    return (-result.score, fold_for_sort(result.item.title), result.item.id)


def rank(
    records: Sequence[CatalogRecord],
    query: str | None,
    *,
    filters: SearchFilters | None = None,
    exact_threshold: int = DEFAULT_EXACT_MATCH_THRESHOLD,
    offset: int = 0,
    limit: int | None = None,
) -> list[ScoredResult[CatalogRecord]]:
    """Rank *records* against *query*, best first.

    An empty query or no match yields an empty list.  *offset* and *limit*
    slice the fully sorted list, so pages never overlap.
    """

    if not lowercase(query):
        return []
    if offset < 0:
        raise ValueError("offset cannot be negative")
    if limit is not None and limit < 0:
        raise ValueError("limit cannot be negative")

    pool = filters.apply(records) if filters is not None else list(records)
    candidates = select_candidates(pool, query, exact_threshold=exact_threshold)
    results = sorted((score_record(record, query) for record in candidates), key=_sort_key)

    end = None if limit is None else offset + limit
    return results[offset:end]
