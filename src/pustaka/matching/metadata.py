"""Book and collection metadata: supplied values, fallback extraction, inference.

A book's metadata either arrives from the catalog store (``SuppliedMetadata``)
or is derived from the record itself by a keyword extractor
(``DerivedMetadata``).  ``resolve_book_metadata`` settles which one applies
before any scoring happens.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from pustaka.catalog.models import BookMetadata, CatalogRecord, Collection, CollectionMetadata
from pustaka.text.normalize import lowercase
from pustaka.timeline.years import era_for_year, era_label, extract_year


DEFAULT_BOOK_PERIOD = "kolonial"
DEFAULT_BOOK_CONTENT_TYPE = "akademik"
DEFAULT_COLLECTION_THEMES = ("sejarah", "indonesia")
DEFAULT_COLLECTION_REGION = "indonesia"
DEFAULT_COLLECTION_CONTENT_TYPE = "koleksi"

# ---- Book fallback extractor ----

_BOOK_THEMES: Mapping[str, tuple[str, ...]] = {
    "sejarah": ("sejarah", "historis", "history", "geschiedenis", "tawarikh"),
    "pendidikan": ("pendidikan", "sekolah", "pengajaran", "education", "onderwijs"),
    "sosial": ("sosial", "masyarakat", "rakyat", "social"),
    "budaya": ("budaya", "kesenian", "tradisi", "adat istiadat"),
    "politik": ("politik", "pemerintahan", "kekuasaan"),
    "militer": ("militer", "perang", "tentara", "knil"),
    "biografi": ("biografi", "riwayat hidup", "memoar"),
}

_BOOK_REGIONS: Mapping[str, tuple[str, ...]] = {
    "sumatra barat": ("padang", "minangkabau", "sumatra barat", "sumatera barat"),
    "aceh": ("aceh", "atjeh"),
    "jawa": ("jawa", "java"),
}

_BOOK_PERIODS: Mapping[str, tuple[str, ...]] = {
    "pra-kolonial": ("pra-kolonial", "majapahit", "sriwijaya", "kesultanan"),
    "kolonial": ("kolonial", "hindia belanda", "nederlandsch-indie", "voc", "penjajahan"),
    "revolusi": ("revolusi", "proklamasi", "kemerdekaan"),
    "modern": ("modern", "kontemporer"),
}

_BOOK_CONTENT_TYPES: Mapping[str, tuple[str, ...]] = {
    "referensi": ("kamus", "ensiklopedia", "woordenboek", "direktori"),
    "biografi": ("biografi", "riwayat hidup", "memoar"),
    "sastra": ("novel", "cerita", "roman", "hikayat", "syair"),
}

# ---- Collection inference ----

_COLLECTION_THEMES: Mapping[str, tuple[str, ...]] = {
    "militer": ("militer", "perang", "tni", "knil", "tentara", "pertahanan"),
    "sejarah": ("sejarah", "historis", "masa lalu", "peristiwa"),
    "kolonial": ("kolonial", "belanda", "penjajahan"),
    "perjuangan": ("perjuangan", "kemerdekaan", "revolusi", "nasionalisme", "perlawanan"),
    "politik": ("politik", "pemerintahan", "negara", "kekuasaan"),
    "budaya": ("budaya", "seni", "tradisi", "adat", "kesenian"),
    "biografi": ("biografi", "tokoh", "pahlawan"),
    "transportasi": ("transportasi", "kereta", "perkeretaapian"),
    "sosial": ("sosial", "masyarakat", "komunitas", "rakyat"),
    "ekonomi": ("ekonomi", "perdagangan", "industri"),
}

_COLLECTION_REGIONS: Mapping[str, tuple[str, ...]] = {
    "indonesia": ("indonesia", "nusantara", "archipelago"),
    "sumatra": ("sumatra", "sumatera", "aceh", "padang", "medan", "batak"),
    "jawa": ("jawa", "java", "jakarta", "surabaya", "yogyakarta", "solo"),
    "sumatra utara": ("sumatra utara", "north sumatra", "medan"),
    "sumatra barat": ("sumatra barat", "west sumatra", "padang", "minangkabau"),
    "aceh": ("aceh", "atjeh"),
    "bali": ("bali",),
    "kalimantan": ("kalimantan", "borneo"),
    "sulawesi": ("sulawesi", "celebes"),
    "papua": ("papua", "irian"),
}

_ISLAND_REGIONS = frozenset({"sumatra", "jawa", "bali", "kalimantan", "sulawesi", "papua"})

_COLLECTION_PERIODS: Mapping[str, tuple[str, ...]] = {
    "kolonial": ("kolonial", "belanda", "hindia belanda", "voc", "knil", "penjajahan"),
    "pra-kolonial": ("pra-kolonial", "kerajaan", "kesultanan", "majapahit", "sriwijaya"),
    "revolusi": ("revolusi", "kemerdekaan", "1945", "proklamasi"),
    "abad ke-19": ("abad ke-19", "19th"),
    "abad ke-20": ("abad ke-20", "20th"),
    "modern": ("modern", "kontemporer", "sekarang"),
}

_COLLECTION_CONTENT_TYPES: Mapping[str, tuple[str, ...]] = {
    "biografi": ("biografi", "tokoh", "pahlawan"),
    "militer": ("militer", "perang", "pertahanan", "tni", "knil"),
    "sejarah": ("sejarah", "historis", "peristiwa"),
    "budaya": ("budaya", "seni", "tradisi", "kesenian"),
    "transportasi": ("transportasi", "kereta", "perkeretaapian"),
    "politik": ("politik", "pemerintahan"),
    "sosial": ("sosial", "masyarakat"),
}

_TEMPORAL_COVERAGE: tuple[tuple[str, str], ...] = (
    ("1825-1830", "1825-1830"),
    ("abad ke-19", "1800-1899"),
    ("kolonial", "1800-1945"),
)


def _matching_keys(text: str, table: Mapping[str, tuple[str, ...]]) -> list[str]:
    return [key for key, keywords in table.items() if any(keyword in text for keyword in keywords)]


def _first_matching_key(text: str, table: Mapping[str, tuple[str, ...]], default: str) -> str:
    keys = _matching_keys(text, table)
    return keys[0] if keys else default


@dataclass(frozen=True, slots=True)
class SuppliedMetadata:
    """Metadata supplied by the catalog store for a book."""

    metadata: BookMetadata


@dataclass(frozen=True, slots=True)
class DerivedMetadata:
    """Metadata to be derived from the record by the fallback extractor."""

    record: CatalogRecord


BookMetadataSource = Union[SuppliedMetadata, DerivedMetadata]


def metadata_source(record: CatalogRecord, metadata: BookMetadata | None = None) -> BookMetadataSource:
    if metadata is not None:
        return SuppliedMetadata(metadata)
    return DerivedMetadata(record)


def resolve_book_metadata(source: BookMetadataSource) -> BookMetadata:
    if isinstance(source, SuppliedMetadata):
        return source.metadata
    if isinstance(source, DerivedMetadata):
        return extract_basic_metadata(source.record)
    raise TypeError(f"Unsupported metadata source: {type(source).__name__}")


def extract_basic_metadata(record: CatalogRecord) -> BookMetadata:
    """Keyword-based metadata for a book that carries none.

    Themes stay empty when nothing matches.  The historical period comes
    from period keywords, then from the publication year, then defaults
    to ``kolonial``.
    """

    text = lowercase(f"{record.title} {record.description or ''}")

    periods = _matching_keys(text, _BOOK_PERIODS)
    if not periods:
        year = extract_year(record.year_raw)
        periods = [era_label(era_for_year(year))] if year is not None else [DEFAULT_BOOK_PERIOD]

    return BookMetadata(
        key_themes=tuple(_matching_keys(text, _BOOK_THEMES)),
        geographic_focus=tuple(_matching_keys(text, _BOOK_REGIONS)),
        historical_period=tuple(periods),
        content_type=_first_matching_key(text, _BOOK_CONTENT_TYPES, DEFAULT_BOOK_CONTENT_TYPE),
    )


def infer_collection_metadata(collection: Collection) -> CollectionMetadata:
    """Rule-based metadata for a collection, built from its name and description."""

    text = lowercase(f"{collection.name} {collection.description or ''}")

    themes = _matching_keys(text, _COLLECTION_THEMES) or list(DEFAULT_COLLECTION_THEMES)

    regions = _matching_keys(text, _COLLECTION_REGIONS)
    if not regions:
        regions = [DEFAULT_COLLECTION_REGION]
    elif DEFAULT_COLLECTION_REGION not in regions and _ISLAND_REGIONS.intersection(regions):
        regions.append(DEFAULT_COLLECTION_REGION)

    periods = _matching_keys(text, _COLLECTION_PERIODS)
    year = extract_year(text)
    if year is not None:
        periods.append(era_label(era_for_year(year)))
    if not periods:
        periods = [DEFAULT_BOOK_PERIOD]

    coverage = next((span for marker, span in _TEMPORAL_COVERAGE if marker in text), "")
    context = ", ".join(dict.fromkeys(periods))
    if coverage:
        context = f"{context} ({coverage})"

    return CollectionMetadata(
        key_themes=tuple(themes),
        geographic_focus=tuple(regions),
        historical_context=context,
        content_characteristics=(
            _first_matching_key(text, _COLLECTION_CONTENT_TYPES, DEFAULT_COLLECTION_CONTENT_TYPE),
        ),
        inferred=True,
    )
