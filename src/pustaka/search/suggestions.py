"""Autocomplete suggestions drawn from catalog titles and authors."""

from __future__ import annotations

from collections.abc import Sequence

from pustaka.catalog.models import CatalogRecord
from pustaka.text.normalize import lowercase, normalize


DEFAULT_SUGGESTION_LIMIT = 5
MIN_PARTIAL_LENGTH = 2
MIN_WORD_LENGTH = 3


def search_suggestions(
    records: Sequence[CatalogRecord],
    partial: str | None,
    *,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[str]:
    """Suggest completions for *partial*, first-seen order, no duplicates.

    Title words that start with the partial query come from each record's
    title; author names are suggested whole when they contain it.
    """
    needle = lowercase(partial)
    if len(needle) < MIN_PARTIAL_LENGTH or limit <= 0:
        return []

    suggestions: dict[str, None] = {}
    for record in records:
        for word in normalize(record.title, min_length=MIN_WORD_LENGTH):
            if word.startswith(needle):
                suggestions.setdefault(word)
        if record.author and needle in lowercase(record.author):
            suggestions.setdefault(record.author.strip())
        if len(suggestions) >= limit:
            break

    return list(suggestions)[:limit]
