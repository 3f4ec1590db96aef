"""CLI entrypoint for classifying catalog records (year, era, language, topics)."""

from __future__ import annotations

import argparse
import json

from dotenv import load_dotenv

load_dotenv()

from pustaka.catalog.loader import load_records
from pustaka.characteristics.composer import compose_characteristics
from pustaka.characteristics.descriptions import select_description
from pustaka.config import EngineSettings, configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Derive characteristics for every catalog record")
    parser.add_argument("--catalog", required=True, help="JSON file with catalog records")
    parser.add_argument("--seed", type=int, default=None, help="Seed for description template variants")
    parser.add_argument("--with-description", action="store_true", help="Include a rule-based description draft")
    args = parser.parse_args(argv)

    try:
        settings = EngineSettings.from_env()
        records = load_records(args.catalog)
    except (OSError, ValueError) as exc:
        print(json.dumps({"error": str(exc), "catalog": args.catalog}, ensure_ascii=True, indent=2))
        return 2

    configure_logging(settings)
    seed = args.seed if args.seed is not None else settings.description_seed

    items: list[dict[str, object]] = []
    for record in records:
        characteristics = compose_characteristics(record, min_token_length=settings.min_token_length)
        item: dict[str, object] = {
            "id": record.id,
            "title": record.title,
            "characteristics": characteristics.to_dict(),
        }
        if args.with_description:
            item["description"] = select_description(record, characteristics, seed=seed).to_dict()
        items.append(item)

    payload = {"catalog": args.catalog, "count": len(items), "seed": seed, "records": items}
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
