"""Canonical data structures shared by the classification and matching engine."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")

UNKNOWN_VALUE = "tidak diketahui"


class LanguageCode(str, Enum):
    ID = "id"
    MS = "ms"
    EN = "en"
    NL = "nl"
    JV = "jv"


DEFAULT_LANGUAGE = LanguageCode.ID


class Era(str, Enum):
    PRE_COLONIAL = "pre-colonial"
    COLONIAL = "colonial"
    EARLY_INDEPENDENCE = "early-independence"
    NEW_ORDER = "new-order"
    REFORM = "reform"
    UNKNOWN = "unknown"


class ResultKind(str, Enum):
    """Provenance of a score: computed, computed from inferred data, or synthetic."""

    GENUINE = "genuine"
    FALLBACK = "fallback"
    EMERGENCY = "emergency"


class MatchType(str, Enum):
    EXACT_PHRASE = "exact_phrase"
    KEYWORD = "keyword"
    DIRECT_METADATA = "direct_metadata"
    SCORING_FAILED = "scoring_failed"
    EMERGENCY = "emergency"


def _first(source: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = source.get(key)
        if value is not None:
            return value
    return None


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _tags(value: Any) -> tuple:
    """Coerce a stored tag list into a tuple without validating its members."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    if isinstance(value, Sequence):
        return tuple(value)
    raise ValueError(f"Expected a list of tags, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class CatalogRecord:
    """A book as supplied by the catalog store."""

    id: str
    title: str
    author: str | None = None
    publisher: str | None = None
    year_raw: str | None = None
    physical_description: str | None = None
    category: str | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "CatalogRecord":
        record_id = _first(payload, "id", "book_id")
        if record_id is None or not str(record_id).strip():
            raise ValueError("Catalog record is missing an id")

        return cls(
            id=str(record_id).strip(),
            title=str(_first(payload, "title", "judul") or ""),
            author=_optional_text(_first(payload, "author", "pengarang")),
            publisher=_optional_text(_first(payload, "publisher", "penerbit")),
            year_raw=_optional_text(_first(payload, "year", "year_raw", "tahun_terbit")),
            physical_description=_optional_text(_first(payload, "physical_description", "deskripsi_fisik")),
            category=_optional_text(_first(payload, "category", "kategori")),
            description=_optional_text(_first(payload, "description", "deskripsi_buku")),
        )

    def to_dict(self) -> dict[str, str | None]:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "publisher": self.publisher,
            "year": self.year_raw,
            "physical_description": self.physical_description,
            "category": self.category,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class CollectionMetadata:
    """Structured topical profile attached to a curated collection."""

    key_themes: tuple[str, ...] = ()
    geographic_focus: tuple[str, ...] = ()
    historical_context: str = ""
    content_characteristics: tuple[str, ...] = ()
    inferred: bool = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "CollectionMetadata":
        context = _first(payload, "historical_context", "temporal_coverage")
        if context is None:
            periods = _tags(payload.get("historical_period"))
            context = ", ".join(str(period) for period in periods)

        characteristics = _first(payload, "content_characteristics")
        if characteristics is None:
            characteristics = payload.get("content_type")

        return cls(
            key_themes=_tags(_first(payload, "key_themes", "subject_categories")),
            geographic_focus=_tags(_first(payload, "geographic_focus", "geographical_focus")),
            historical_context=context,
            content_characteristics=_tags(characteristics),
            inferred=bool(payload.get("is_fallback", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "key_themes": list(self.key_themes),
            "geographic_focus": list(self.geographic_focus),
            "historical_context": self.historical_context,
            "content_characteristics": list(self.content_characteristics),
            "inferred": self.inferred,
        }


@dataclass(frozen=True, slots=True)
class Collection:
    """A named, user-curated grouping of catalog records."""

    id: str
    name: str
    description: str | None = None
    book_ids: tuple[str, ...] = ()
    metadata: CollectionMetadata | None = None
    # Set when stored metadata could not be read; scoring treats it as a failure.
    metadata_error: str | None = None

    def contains(self, book_id: str) -> bool:
        return book_id in self.book_ids

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Collection":
        collection_id = payload.get("id")
        if collection_id is None or not str(collection_id).strip():
            raise ValueError("Collection is missing an id")

        book_ids: list[str] = [str(book_id) for book_id in payload.get("book_ids") or ()]
        for book in payload.get("books") or ():
            if isinstance(book, Mapping) and book.get("id") is not None:
                book_ids.append(str(book["id"]))

        raw_metadata = _first(payload, "metadata", "ai_metadata", "metadata_structured")
        metadata = None
        metadata_error = None
        if isinstance(raw_metadata, Mapping):
            try:
                metadata = CollectionMetadata.from_dict(raw_metadata)
            except ValueError as exc:
                logger.warning("Collection %s has unreadable metadata: %s", collection_id, exc)
                metadata_error = str(exc)

        return cls(
            id=str(collection_id).strip(),
            name=str(payload.get("name") or ""),
            description=_optional_text(payload.get("description")),
            book_ids=tuple(dict.fromkeys(book_ids)),
            metadata=metadata,
            metadata_error=metadata_error,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "book_ids": list(self.book_ids),
            "metadata": self.metadata.to_dict() if self.metadata else None,
            "metadata_error": self.metadata_error,
        }


@dataclass(frozen=True, slots=True)
class BookMetadata:
    """Structured topical profile of a single book."""

    key_themes: tuple[str, ...] = ()
    geographic_focus: tuple[str, ...] = ()
    historical_period: tuple[str, ...] = ()
    content_type: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "BookMetadata":
        return cls(
            key_themes=_tags(_first(payload, "key_themes", "subject_categories")),
            geographic_focus=_tags(_first(payload, "geographic_focus", "geographical_focus")),
            historical_period=_tags(payload.get("historical_period")),
            content_type=str(payload.get("content_type") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "key_themes": list(self.key_themes),
            "geographic_focus": list(self.geographic_focus),
            "historical_period": list(self.historical_period),
            "content_type": self.content_type,
        }


@dataclass(frozen=True, slots=True)
class Characteristics:
    """Derived year/era/language/topic bundle for one catalog record."""

    year: int | None
    era: Era
    language: LanguageCode
    topics: tuple[str, ...]
    confidence: float
    has_author: bool = False
    has_publisher: bool = False

    @property
    def is_ancient(self) -> bool:
        return self.year is not None and self.year < 1800

    @property
    def is_colonial(self) -> bool:
        return self.year is not None and 1800 <= self.year <= 1945

    @property
    def is_post_independence(self) -> bool:
        return self.year is not None and self.year > 1945

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "era": self.era.value,
            "language": self.language.value,
            "topics": list(self.topics),
            "confidence": self.confidence,
            "has_author": self.has_author,
            "has_publisher": self.has_publisher,
        }


@dataclass(frozen=True, slots=True)
class ScoredResult(Generic[T]):
    """An entity paired with the score a ranker or scorer assigned to it."""

    item: T
    score: float
    match_type: MatchType | None = None
    kind: ResultKind = ResultKind.GENUINE
    confidence: float | None = None
    reasoning: str | None = None
    details: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_synthetic(self) -> bool:
        return self.kind is ResultKind.EMERGENCY

    def to_dict(self) -> dict[str, Any]:
        return {
            "item": self.item.to_dict(),
            "score": self.score,
            "match_type": self.match_type.value if self.match_type else None,
            "kind": self.kind.value,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "details": dict(self.details),
        }
