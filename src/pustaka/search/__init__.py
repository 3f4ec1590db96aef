"""Catalog search: relevance ranking, filters and suggestions."""

from .filters import SearchFilters
from .ranking import DEFAULT_EXACT_MATCH_THRESHOLD, query_phrases, query_words, rank, score_record, select_candidates
from .suggestions import search_suggestions

__all__ = [
    "DEFAULT_EXACT_MATCH_THRESHOLD",
    "SearchFilters",
    "query_phrases",
    "query_words",
    "rank",
    "score_record",
    "search_suggestions",
    "select_candidates",
]
