from __future__ import annotations

from pustaka.catalog.models import BookMetadata, CatalogRecord, Collection
from pustaka.matching.metadata import (
    DerivedMetadata,
    SuppliedMetadata,
    extract_basic_metadata,
    infer_collection_metadata,
    metadata_source,
    resolve_book_metadata,
)


def test_fallback_extractor_reads_title_and_description() -> None:
    record = CatalogRecord(
        id="1",
        title="Sejarah Pendidikan di Minangkabau",
        description="Kajian sosial masyarakat Padang",
    )

    metadata = extract_basic_metadata(record)

    assert metadata.key_themes == ("sejarah", "pendidikan", "sosial")
    assert metadata.geographic_focus == ("sumatra barat",)
    assert metadata.historical_period == ("kolonial",)
    assert metadata.content_type == "akademik"


def test_fallback_extractor_regions() -> None:
    assert extract_basic_metadata(CatalogRecord(id="1", title="Hikayat Aceh")).geographic_focus == ("aceh",)
    assert extract_basic_metadata(CatalogRecord(id="2", title="History of Java")).geographic_focus == ("jawa",)


def test_fallback_period_uses_keywords_then_year() -> None:
    by_keyword = extract_basic_metadata(CatalogRecord(id="1", title="Revolusi di Surabaya", year_raw="1990"))
    by_year = extract_basic_metadata(CatalogRecord(id="2", title="Catatan Harian", year_raw="1990"))

    assert by_keyword.historical_period == ("revolusi",)
    assert by_year.historical_period == ("orde baru",)


def test_fallback_content_type() -> None:
    assert extract_basic_metadata(CatalogRecord(id="1", title="Kamus Bahasa Jawa")).content_type == "referensi"
    assert extract_basic_metadata(CatalogRecord(id="2", title="Novel Siti Nurbaya")).content_type == "sastra"


def test_fallback_extractor_leaves_themes_empty_without_hits() -> None:
    assert extract_basic_metadata(CatalogRecord(id="1", title="")).key_themes == ()


def test_resolve_prefers_supplied_metadata() -> None:
    record = CatalogRecord(id="1", title="Sejarah Aceh")
    supplied = BookMetadata(key_themes=("budaya",))

    assert metadata_source(record, supplied) == SuppliedMetadata(supplied)
    assert metadata_source(record) == DerivedMetadata(record)
    assert resolve_book_metadata(SuppliedMetadata(supplied)) is supplied
    assert resolve_book_metadata(DerivedMetadata(record)).key_themes == ("sejarah",)


def test_collection_inference_from_name_and_description() -> None:
    collection = Collection(
        id="c-1",
        name="Perang Jawa 1825-1830",
        description="Koleksi tentang perlawanan Diponegoro terhadap Belanda",
    )

    metadata = infer_collection_metadata(collection)

    assert metadata.inferred
    assert metadata.key_themes == ("militer", "kolonial", "perjuangan")
    assert metadata.geographic_focus == ("jawa", "indonesia")
    assert "kolonial" in metadata.historical_context
    assert "1825-1830" in metadata.historical_context
    assert metadata.content_characteristics == ("militer",)


def test_collection_inference_defaults() -> None:
    metadata = infer_collection_metadata(Collection(id="c-2", name="Favorit Saya"))

    assert metadata.key_themes == ("sejarah", "indonesia")
    assert metadata.geographic_focus == ("indonesia",)
    assert metadata.historical_context == "kolonial"
    assert metadata.content_characteristics == ("koleksi",)
