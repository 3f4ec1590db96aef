"""CLI entrypoint for ranked catalog search."""

from __future__ import annotations

import argparse
import json

from dotenv import load_dotenv

load_dotenv()

from pustaka.catalog.loader import load_records
from pustaka.config import EngineSettings, configure_logging
from pustaka.search.filters import SearchFilters
from pustaka.search.ranking import rank
from pustaka.search.suggestions import search_suggestions


def _error(message: str, **extra: object) -> int:
    print(json.dumps({"error": message, **extra}, ensure_ascii=True, indent=2))
    return 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rank catalog records against a free-text query")
    parser.add_argument("--catalog", required=True, help="JSON file with catalog records")
    parser.add_argument("--query", required=True, help="Search query text")
    parser.add_argument("--limit", type=int, default=10, help="Maximum number of returned results")
    parser.add_argument("--offset", type=int, default=0, help="Number of ranked results to skip")
    parser.add_argument("--author", default=None, help="Optional author filter (substring, case-insensitive)")
    parser.add_argument("--publisher", default=None, help="Optional publisher filter (substring, case-insensitive)")
    parser.add_argument("--category", default=None, help="Optional category filter (exact, case-insensitive)")
    parser.add_argument("--year-from", type=int, default=None, help="Earliest publication year")
    parser.add_argument("--year-to", type=int, default=None, help="Latest publication year")
    parser.add_argument("--suggest", action="store_true", help="Include autocomplete suggestions for the query")
    args = parser.parse_args(argv)

    try:
        settings = EngineSettings.from_env()
        filters = SearchFilters(
            author=args.author,
            publisher=args.publisher,
            year_from=args.year_from,
            year_to=args.year_to,
            category=args.category,
        )
        records = load_records(args.catalog)
    except (OSError, ValueError) as exc:
        return _error(str(exc), catalog=args.catalog)

    configure_logging(settings)
    safe_limit = max(1, min(args.limit, 100))
    safe_offset = max(0, args.offset)

    results = rank(
        records,
        args.query,
        filters=filters,
        exact_threshold=settings.exact_match_threshold,
        offset=safe_offset,
        limit=safe_limit,
    )

    payload: dict[str, object] = {
        "query": args.query,
        "limit": safe_limit,
        "offset": safe_offset,
        "filters": filters.to_dict(),
        "results": [result.to_dict() for result in results],
    }
    if args.suggest:
        payload["suggestions"] = search_suggestions(records, args.query, limit=settings.suggestion_limit)
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
