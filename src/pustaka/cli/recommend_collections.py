"""CLI entrypoint for recommending collections for one catalog record."""

from __future__ import annotations

import argparse
import json

from dotenv import load_dotenv

load_dotenv()

from pustaka.catalog.loader import load_book_metadata, load_collections, load_records
from pustaka.config import EngineSettings, configure_logging
from pustaka.matching.recommend import recommend_collections


def _error(message: str, **extra: object) -> int:
    print(json.dumps({"error": message, **extra}, ensure_ascii=True, indent=2))
    return 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Recommend curated collections for a catalog record")
    parser.add_argument("--catalog", required=True, help="JSON file with catalog records")
    parser.add_argument("--collections", required=True, help="JSON file with collections")
    parser.add_argument("--book-id", required=True, help="Id of the catalog record to place")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of recommendations")
    parser.add_argument(
        "--infer-collection-metadata",
        action="store_true",
        help="Infer metadata for collections that have none (results are flagged as fallback)",
    )
    args = parser.parse_args(argv)

    try:
        settings = EngineSettings.from_env()
        records = load_records(args.catalog)
        collections = load_collections(args.collections)
        book_metadata = load_book_metadata(args.catalog)
    except (OSError, ValueError) as exc:
        return _error(str(exc))

    configure_logging(settings)
    book = next((record for record in records if record.id == args.book_id), None)
    if book is None:
        return _error("book not found", book_id=args.book_id)

    limit = settings.recommendation_limit if args.limit is None else max(1, args.limit)
    results = recommend_collections(
        book,
        collections,
        metadata=book_metadata.get(book.id),
        limit=limit,
        infer_missing=args.infer_collection_metadata,
    )

    payload = {
        "book": book.to_dict(),
        "metadata_source": "supplied" if book.id in book_metadata else "derived",
        "limit": limit,
        "infer_collection_metadata": args.infer_collection_metadata,
        "recommendations": [result.to_dict() for result in results],
    }
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
