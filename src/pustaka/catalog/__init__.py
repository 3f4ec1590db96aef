"""Catalog records, collections and their JSON loaders."""

from .loader import load_book_metadata, load_collections, load_records
from .models import (
    DEFAULT_LANGUAGE,
    UNKNOWN_VALUE,
    BookMetadata,
    CatalogRecord,
    Characteristics,
    Collection,
    CollectionMetadata,
    Era,
    LanguageCode,
    MatchType,
    ResultKind,
    ScoredResult,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "UNKNOWN_VALUE",
    "BookMetadata",
    "CatalogRecord",
    "Characteristics",
    "Collection",
    "CollectionMetadata",
    "Era",
    "LanguageCode",
    "MatchType",
    "ResultKind",
    "ScoredResult",
    "load_book_metadata",
    "load_collections",
    "load_records",
]
