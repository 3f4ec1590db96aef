"""Keyword-based topic extraction for catalog titles using a JSON thesaurus."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from pustaka.errors import ClassificationError
from pustaka.text.normalize import lowercase


_THESAURUS_PATH = Path(__file__).parent / "topics.json"
DEFAULT_TOPIC = "literatur"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TopicCategory:
    name: str
    keywords: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TopicThesaurus:
    categories: tuple[TopicCategory, ...]
    contextual: tuple[TopicCategory, ...]
    contextual_topics: dict[str, tuple[str, ...]]
    default_topic: str
    max_topics: int


@lru_cache(maxsize=1)
def load_thesaurus() -> TopicThesaurus:
    raw = json.loads(_THESAURUS_PATH.read_text(encoding="utf-8"))
    categories = tuple(
        TopicCategory(name=entry["name"], keywords=tuple(keyword.lower() for keyword in entry["keywords"]))
        for entry in raw["categories"]
    )
    contextual = tuple(
        TopicCategory(name=name, keywords=tuple(keyword.lower() for keyword in rule["keywords"]))
        for name, rule in raw["contextual"].items()
    )
    contextual_topics = {name: tuple(rule["topics"]) for name, rule in raw["contextual"].items()}
    return TopicThesaurus(
        categories=categories,
        contextual=contextual,
        contextual_topics=contextual_topics,
        default_topic=raw["default_topic"],
        max_topics=int(raw["max_topics"]),
    )


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def match_topics(title: str | None, thesaurus: TopicThesaurus | None = None) -> list[str]:
    """Return matched topics without the default fallback; may be empty.

    Raises ``ClassificationError`` when *title* is not text.
    """
    if title is not None and not isinstance(title, str):
        raise ClassificationError(f"Title must be a string, got {type(title).__name__}")

    source = thesaurus or load_thesaurus()
    text = lowercase(title)
    if not text:
        return []

    topics = [category.name for category in source.categories if _contains_any(text, category.keywords)]
    if not topics:
        # Titles without a direct keyword still reveal context through place or
        # governance vocabulary.
        for rule in source.contextual:
            if _contains_any(text, rule.keywords):
                topics.extend(topic for topic in source.contextual_topics[rule.name] if topic not in topics)

    return topics[: source.max_topics]


def extract_topics(title: str | None) -> list[str]:
    """Map *title* to one to three topic categories.

    Categories are reported in thesaurus order; when nothing matches, the
    contextual rules are tried before falling back to the default topic.
    Never raises.
    """
    try:
        thesaurus = load_thesaurus()
        topics = match_topics(title, thesaurus)
    except (ClassificationError, OSError, KeyError, ValueError):
        logger.warning("Topic extraction failed for %r", title, exc_info=True)
        return [DEFAULT_TOPIC]
    return topics or [thesaurus.default_topic]
