"""Book-to-collection matching, recommendations and collection similarity."""

from .metadata import (
    BookMetadataSource,
    DerivedMetadata,
    SuppliedMetadata,
    extract_basic_metadata,
    infer_collection_metadata,
    metadata_source,
    resolve_book_metadata,
)
from .recommend import (
    DEFAULT_RECOMMENDATION_LIMIT,
    emergency_recommendations,
    recommend_collections,
    score_collections,
)
from .scorer import MatchResult, confidence_for_score, match_reasoning, score_match, validate_book_metadata
from .similarity import jaccard, similar_collections

__all__ = [
    "DEFAULT_RECOMMENDATION_LIMIT",
    "BookMetadataSource",
    "DerivedMetadata",
    "MatchResult",
    "SuppliedMetadata",
    "confidence_for_score",
    "emergency_recommendations",
    "extract_basic_metadata",
    "infer_collection_metadata",
    "jaccard",
    "match_reasoning",
    "metadata_source",
    "recommend_collections",
    "resolve_book_metadata",
    "score_collections",
    "score_match",
    "similar_collections",
    "validate_book_metadata",
]
