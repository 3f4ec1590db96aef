"""Collection recommendations for a single book, with partial-failure tolerance."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pustaka.catalog.models import (
    BookMetadata,
    CatalogRecord,
    Collection,
    MatchType,
    ResultKind,
    ScoredResult,
)
from pustaka.errors import InvalidMetadataError
from pustaka.matching.metadata import (
    DerivedMetadata,
    infer_collection_metadata,
    metadata_source,
    resolve_book_metadata,
)
from pustaka.matching.scorer import confidence_for_score, score_match, validate_book_metadata
from pustaka.text.normalize import fold_for_sort


DEFAULT_RECOMMENDATION_LIMIT = 3
EMERGENCY_BASE_SCORE = 50
EMERGENCY_SCORE_STEP = 10
EMERGENCY_CONFIDENCE = 0.3

logger = logging.getLogger(__name__)


def _eligible(book: CatalogRecord, candidates: Sequence[Collection]) -> list[Collection]:
    return [collection for collection in candidates if not collection.contains(book.id)]


def _failed(collection: Collection) -> ScoredResult[Collection]:
    return ScoredResult(
        item=collection,
        score=0,
        match_type=MatchType.SCORING_FAILED,
        kind=ResultKind.FALLBACK,
        confidence=confidence_for_score(0),
        reasoning="Penilaian koleksi gagal; skor diatur ke 0.",
    )


def _score_collection(
    book_metadata: BookMetadata,
    collection: Collection,
    *,
    derived: bool,
    infer_missing: bool,
) -> ScoredResult[Collection]:
    if collection.metadata_error is not None:
        raise InvalidMetadataError(f"Collection {collection.id} metadata is unreadable: {collection.metadata_error}")

    collection_metadata = collection.metadata
    if collection_metadata is None and infer_missing:
        collection_metadata = infer_collection_metadata(collection)

    match = score_match(book_metadata, collection_metadata)
    inferred = collection_metadata is not None and collection_metadata.inferred
    return ScoredResult(
        item=collection,
        score=match.score,
        match_type=MatchType.DIRECT_METADATA,
        kind=ResultKind.FALLBACK if derived or inferred else ResultKind.GENUINE,
        confidence=match.confidence,
        reasoning=match.reasoning,
        details={
            "shared_themes": list(match.shared_themes),
            "shared_regions": list(match.shared_regions),
            "matched_periods": list(match.matched_periods),
            "content_type_match": match.content_type_match,
            "has_collection_metadata": collection_metadata is not None,
        },
    )


def _sort_key(result: ScoredResult[Collection]) -> tuple[float, bool, str, str]:
    failed = result.match_type is MatchType.SCORING_FAILED
    return (-result.score, failed, fold_for_sort(result.item.name), result.item.id)


def score_collections(
    book: CatalogRecord,
    candidates: Sequence[Collection],
    *,
    metadata: BookMetadata | None = None,
    infer_missing: bool = False,
) -> list[ScoredResult[Collection]]:
    """Score every eligible collection, best first.

    A collection whose scoring raises is kept with score 0 and
    ``MatchType.SCORING_FAILED``; the rest of the batch is unaffected.
    """

    source = metadata_source(book, metadata)
    book_metadata = resolve_book_metadata(source)
    validate_book_metadata(book_metadata)
    derived = isinstance(source, DerivedMetadata)

    results: list[ScoredResult[Collection]] = []
    for collection in _eligible(book, candidates):
        try:
            results.append(
                _score_collection(book_metadata, collection, derived=derived, infer_missing=infer_missing)
            )
        except Exception:
            logger.warning("Scoring failed for collection %s; scoring it 0", collection.id, exc_info=True)
            results.append(_failed(collection))

    results.sort(key=_sort_key)
    return results


def emergency_recommendations(
    book: CatalogRecord,
    candidates: Sequence[Collection],
    *,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> list[ScoredResult[Collection]]:
    """Synthetic recommendations used when scoring is unavailable.

    Up to *limit* collections not containing the book, in input order, with
    descending synthetic scores (``..., 60, 50``) and a fixed low confidence.
    """

    chosen = [
        collection
        for collection in candidates
        if isinstance(collection, Collection) and not collection.contains(book.id)
    ][: max(0, limit)]

    count = len(chosen)
    return [
        ScoredResult(
            item=collection,
            score=EMERGENCY_BASE_SCORE + EMERGENCY_SCORE_STEP * (count - 1 - index),
            match_type=MatchType.EMERGENCY,
            kind=ResultKind.EMERGENCY,
            confidence=EMERGENCY_CONFIDENCE,
            reasoning="Rekomendasi darurat: penilaian metadata sedang tidak tersedia.",
        )
        for index, collection in enumerate(chosen)
    ]


def recommend_collections(
    book: CatalogRecord,
    candidates: Sequence[Collection],
    *,
    metadata: BookMetadata | None = None,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    infer_missing: bool = False,
) -> list[ScoredResult[Collection]]:
    """Top *limit* collections for *book*, excluding ones that already hold it.

    Without *metadata* the book's metadata is derived from the record and
    every result is flagged ``ResultKind.FALLBACK``.  If the pipeline fails
    as a whole, ``emergency_recommendations`` answers instead.
    """

    if limit <= 0:
        return []

    try:
        results = score_collections(book, candidates, metadata=metadata, infer_missing=infer_missing)
    except Exception:
        logger.error("Recommendation scoring failed for book %s; using emergency fallback", book.id, exc_info=True)
        return emergency_recommendations(book, candidates, limit=limit)

    return results[:limit]
