from __future__ import annotations

import pytest

from pustaka.catalog.models import Collection
from pustaka.matching.similarity import jaccard, similar_collections


def _collection(collection_id: str, name: str, *books: str) -> Collection:
    return Collection(id=collection_id, name=name, book_ids=books)


def test_jaccard_coefficient() -> None:
    assert jaccard({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)
    assert jaccard(set(), set()) == 0.0


def test_similar_collections_rank_by_shared_books() -> None:
    target = _collection("t", "Target", "1", "2", "3")
    close = _collection("c", "Close", "1", "2", "3", "4")
    partial = _collection("p", "Partial", "3", "9")
    unrelated = _collection("u", "Unrelated", "7")

    results = similar_collections(target, [unrelated, partial, target, close])

    assert [result.item.id for result in results] == ["c", "p"]
    assert results[0].score == pytest.approx(0.75)
    assert results[0].details["common_books"] == 3


def test_similar_collections_limit() -> None:
    target = _collection("t", "Target", "1")
    candidates = [_collection(str(i), f"C{i}", "1") for i in range(10)]

    assert len(similar_collections(target, candidates, limit=5)) == 5
