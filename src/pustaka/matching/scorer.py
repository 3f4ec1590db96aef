"""Book-to-collection compatibility scoring over structured metadata.

Four independently capped components are summed and clamped to 0..100:
theme overlap (40), geographic overlap (30), historical period found in
the collection's historical context (20) and content type (10).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pustaka.catalog.models import BookMetadata, CollectionMetadata
from pustaka.errors import InvalidMetadataError
from pustaka.matching.metadata import BookMetadataSource, DerivedMetadata, SuppliedMetadata, resolve_book_metadata


POINTS_PER_HIT = 10
THEME_CAP = 40
GEOGRAPHY_CAP = 30
HISTORY_CAP = 20
CONTENT_TYPE_POINTS = 10
MAX_SCORE = 100

# (minimum score, confidence, reasoning lead)
_TIERS: tuple[tuple[int, float, str], ...] = (
    (80, 0.9, "Kecocokan sangat tinggi"),
    (60, 0.7, "Kecocokan tinggi"),
    (40, 0.5, "Kecocokan sedang"),
    (0, 0.3, "Kecocokan rendah"),
)


@dataclass(frozen=True, slots=True)
class MatchResult:
    score: int
    confidence: float
    reasoning: str
    shared_themes: tuple[str, ...] = ()
    shared_regions: tuple[str, ...] = ()
    matched_periods: tuple[str, ...] = ()
    content_type_match: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "score": self.score,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "shared_themes": list(self.shared_themes),
            "shared_regions": list(self.shared_regions),
            "matched_periods": list(self.matched_periods),
            "content_type_match": self.content_type_match,
        }


def _normalized_tags(values: Iterable[object], *, field: str) -> list[str]:
    tags: list[str] = []
    for value in values:
        if not isinstance(value, str):
            raise InvalidMetadataError(f"{field} must contain strings, got {type(value).__name__}")
        tag = value.strip().lower()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def _shared(left: list[str], right: list[str]) -> tuple[str, ...]:
    right_set = set(right)
    return tuple(tag for tag in left if tag in right_set)


def confidence_for_score(score: float) -> float:
    for minimum, confidence, _ in _TIERS:
        if score >= minimum:
            return confidence
    return _TIERS[-1][1]


def match_reasoning(score: float, shared_themes: Iterable[str] = (), shared_regions: Iterable[str] = ()) -> str:
    lead = next((phrase for minimum, _, phrase in _TIERS if score >= minimum), _TIERS[-1][2])

    details: list[str] = []
    themes = list(shared_themes)
    regions = list(shared_regions)
    if themes:
        details.append(f"tema {', '.join(themes)}")
    if regions:
        details.append(f"wilayah {', '.join(regions)}")

    if details:
        return f"{lead}: kesamaan {' dan '.join(details)}."
    if score < 40:
        return f"{lead}: tidak ada kesamaan tema atau wilayah, pertimbangkan peninjauan manual."
    return f"{lead} berdasarkan periode sejarah dan jenis konten."


def validate_book_metadata(book: BookMetadata) -> None:
    """Raise ``InvalidMetadataError`` when *book* cannot be scored at all."""
    _normalized_tags(book.key_themes, field="key_themes")
    _normalized_tags(book.geographic_focus, field="geographic_focus")
    _normalized_tags(book.historical_period, field="historical_period")
    if not isinstance(book.content_type, str):
        raise InvalidMetadataError("content_type must be a string")


def score_match(book: BookMetadata | BookMetadataSource, collection: CollectionMetadata | None) -> MatchResult:
    """Score *book* against a collection's metadata.

    *book* is either resolved metadata or a metadata source; a
    ``DerivedMetadata`` source is run through the keyword extractor first.
    Missing collection metadata is no signal and scores 0.  Non-string tag
    values raise ``InvalidMetadataError``.
    """

    if isinstance(book, (SuppliedMetadata, DerivedMetadata)):
        book = resolve_book_metadata(book)
    if collection is None:
        return MatchResult(score=0, confidence=confidence_for_score(0), reasoning=match_reasoning(0))

    book_themes = _normalized_tags(book.key_themes, field="key_themes")
    book_regions = _normalized_tags(book.geographic_focus, field="geographic_focus")
    book_periods = _normalized_tags(book.historical_period, field="historical_period")
    collection_themes = _normalized_tags(collection.key_themes, field="key_themes")
    collection_regions = _normalized_tags(collection.geographic_focus, field="geographic_focus")
    collection_contents = _normalized_tags(collection.content_characteristics, field="content_characteristics")

    if not isinstance(collection.historical_context, str):
        raise InvalidMetadataError("historical_context must be a string")
    if not isinstance(book.content_type, str):
        raise InvalidMetadataError("content_type must be a string")
    context = collection.historical_context.lower()
    content_type = book.content_type.strip().lower()

    shared_themes = _shared(book_themes, collection_themes)
    shared_regions = _shared(book_regions, collection_regions)
    matched_periods = tuple(period for period in book_periods if period in context)
    content_type_match = bool(content_type) and content_type in collection_contents

    score = (
        min(THEME_CAP, POINTS_PER_HIT * len(shared_themes))
        + min(GEOGRAPHY_CAP, POINTS_PER_HIT * len(shared_regions))
        + min(HISTORY_CAP, POINTS_PER_HIT * len(matched_periods))
        + (CONTENT_TYPE_POINTS if content_type_match else 0)
    )
    score = max(0, min(MAX_SCORE, score))

    return MatchResult(
        score=score,
        confidence=confidence_for_score(score),
        reasoning=match_reasoning(score, shared_themes, shared_regions),
        shared_themes=shared_themes,
        shared_regions=shared_regions,
        matched_periods=matched_periods,
        content_type_match=content_type_match,
    )
