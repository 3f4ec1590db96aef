"""Combine year, language and topic signals into one characteristics record."""

from __future__ import annotations

import logging

from pustaka.catalog.models import (
    DEFAULT_LANGUAGE,
    UNKNOWN_VALUE,
    CatalogRecord,
    Characteristics,
    LanguageCode,
)
from pustaka.language.detection import DEFAULT_MIN_TOKEN_LENGTH, classify_title
from pustaka.taxonomy.topics import extract_topics
from pustaka.timeline.years import era_for_year, extract_year


BASE_CONFIDENCE = 0.5
YEAR_CONFIDENCE = 0.2
AUTHOR_CONFIDENCE = 0.15
TOPIC_CONFIDENCE = 0.1
LANGUAGE_CONFIDENCE = 0.05
PUBLISHER_CONFIDENCE = 0.05

logger = logging.getLogger(__name__)


def _is_known(value: str | None) -> bool:
    return bool(value and value.strip() and value.strip().lower() != UNKNOWN_VALUE)


def _title_language(title: str, *, min_token_length: int) -> tuple[LanguageCode, bool]:
    try:
        detection = classify_title(title, min_token_length=min_token_length)
    except Exception:
        logger.warning("Language detection failed for %r", title, exc_info=True)
        return DEFAULT_LANGUAGE, False
    return detection.language, not detection.is_fallback


def compose_characteristics(
    record: CatalogRecord,
    *,
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
) -> Characteristics:
    """Derive year, era, language, topics and a confidence for *record*."""

    year = extract_year(record.year_raw)
    language, language_decided = _title_language(record.title, min_token_length=min_token_length)
    topics = tuple(extract_topics(record.title))
    has_author = _is_known(record.author)
    has_publisher = _is_known(record.publisher)

    confidence = BASE_CONFIDENCE
    if year is not None:
        confidence += YEAR_CONFIDENCE
    if has_author:
        confidence += AUTHOR_CONFIDENCE
    if topics:
        confidence += TOPIC_CONFIDENCE
    if language_decided:
        confidence += LANGUAGE_CONFIDENCE
    if has_publisher:
        confidence += PUBLISHER_CONFIDENCE

    return Characteristics(
        year=year,
        era=era_for_year(year),
        language=language,
        topics=topics,
        confidence=round(min(confidence, 1.0), 2),
        has_author=has_author,
        has_publisher=has_publisher,
    )
