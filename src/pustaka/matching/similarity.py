"""Collection-to-collection similarity over shared books."""

from __future__ import annotations

from collections.abc import Sequence

from pustaka.catalog.models import Collection, ScoredResult
from pustaka.text.normalize import fold_for_sort


DEFAULT_SIMILAR_LIMIT = 5


def jaccard(left: set[str] | frozenset[str], right: set[str] | frozenset[str]) -> float:
    union = len(left | right)
    if union == 0:
        return 0.0
    return len(left & right) / union


def similar_collections(
    target: Collection,
    candidates: Sequence[Collection],
    *,
    limit: int = DEFAULT_SIMILAR_LIMIT,
) -> list[ScoredResult[Collection]]:
    """Collections sharing books with *target*, by Jaccard coefficient over book ids."""

    target_books = frozenset(target.book_ids)
    scored: list[ScoredResult[Collection]] = []
    for collection in candidates:
        if collection.id == target.id:
            continue
        books = frozenset(collection.book_ids)
        similarity = jaccard(target_books, books)
        if similarity <= 0:
            continue
        scored.append(
            ScoredResult(
                item=collection,
                score=round(similarity, 4),
                details={"common_books": len(target_books & books)},
            )
        )

    scored.sort(key=lambda result: (-result.score, fold_for_sort(result.item.name), result.item.id))
    return scored[: max(0, limit)]
