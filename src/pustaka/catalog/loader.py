"""Load catalog records and collections from JSON exports of the catalog store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pustaka.catalog.models import BookMetadata, CatalogRecord, Collection


logger = logging.getLogger(__name__)

_BOOK_METADATA_KEYS = ("metadata_structured", "ai_metadata", "metadata")


def _read_items(path: Path, *, key: str) -> list[Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc

    # Either a bare list or an export envelope such as {"books": [...]}.
    if isinstance(payload, dict):
        payload = payload.get(key)
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON list of {key}")
    return payload


def load_records(path: str | Path) -> list[CatalogRecord]:
    source = Path(path)
    records = [CatalogRecord.from_dict(item) for item in _read_items(source, key="books") if isinstance(item, dict)]
    logger.info("Loaded %d catalog records from %s", len(records), source)
    return records


def load_book_metadata(path: str | Path) -> dict[str, BookMetadata]:
    """Metadata the catalog store already holds, keyed by record id."""
    source = Path(path)
    metadata: dict[str, BookMetadata] = {}
    for item in _read_items(source, key="books"):
        if not isinstance(item, dict):
            continue
        raw = next((item[key] for key in _BOOK_METADATA_KEYS if isinstance(item.get(key), dict)), None)
        if raw is not None:
            metadata[CatalogRecord.from_dict(item).id] = BookMetadata.from_dict(raw)
    return metadata


def load_collections(path: str | Path) -> list[Collection]:
    source = Path(path)
    collections = [
        Collection.from_dict(item) for item in _read_items(source, key="collections") if isinstance(item, dict)
    ]
    logger.info("Loaded %d collections from %s", len(collections), source)
    return collections
