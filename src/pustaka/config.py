"""Runtime configuration for the classification and matching engine."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping


DEFAULT_MIN_TOKEN_LENGTH = 3
DEFAULT_EXACT_MATCH_THRESHOLD = 8
DEFAULT_RECOMMENDATION_LIMIT = 3
DEFAULT_SUGGESTION_LIMIT = 5
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Validated engine settings read from ``PUSTAKA_*`` environment variables."""

    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH
    exact_match_threshold: int = DEFAULT_EXACT_MATCH_THRESHOLD
    recommendation_limit: int = DEFAULT_RECOMMENDATION_LIMIT
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    description_seed: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EngineSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        min_token_raw = source.get("PUSTAKA_MIN_TOKEN_LENGTH", str(DEFAULT_MIN_TOKEN_LENGTH)).strip()
        threshold_raw = source.get("PUSTAKA_EXACT_MATCH_THRESHOLD", str(DEFAULT_EXACT_MATCH_THRESHOLD)).strip()
        recommendation_raw = source.get("PUSTAKA_RECOMMENDATION_LIMIT", str(DEFAULT_RECOMMENDATION_LIMIT)).strip()
        suggestion_raw = source.get("PUSTAKA_SUGGESTION_LIMIT", str(DEFAULT_SUGGESTION_LIMIT)).strip()
        seed_raw = source.get("PUSTAKA_DESCRIPTION_SEED", "").strip()
        log_level = source.get("PUSTAKA_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

        if not min_token_raw:
            raise ValueError("PUSTAKA_MIN_TOKEN_LENGTH cannot be empty")
        if not threshold_raw:
            raise ValueError("PUSTAKA_EXACT_MATCH_THRESHOLD cannot be empty")
        if not recommendation_raw:
            raise ValueError("PUSTAKA_RECOMMENDATION_LIMIT cannot be empty")
        if not suggestion_raw:
            raise ValueError("PUSTAKA_SUGGESTION_LIMIT cannot be empty")
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"PUSTAKA_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

        description_seed: int | None = None
        if seed_raw:
            try:
                description_seed = int(seed_raw)
            except ValueError as exc:
                raise ValueError(f"PUSTAKA_DESCRIPTION_SEED must be an integer, got {seed_raw!r}") from exc

        return cls(
            min_token_length=_parse_positive_int(name="PUSTAKA_MIN_TOKEN_LENGTH", raw_value=min_token_raw),
            exact_match_threshold=_parse_positive_int(name="PUSTAKA_EXACT_MATCH_THRESHOLD", raw_value=threshold_raw),
            recommendation_limit=_parse_positive_int(name="PUSTAKA_RECOMMENDATION_LIMIT", raw_value=recommendation_raw),
            suggestion_limit=_parse_positive_int(name="PUSTAKA_SUGGESTION_LIMIT", raw_value=suggestion_raw),
            description_seed=description_seed,
            log_level=log_level,
        )


def configure_logging(settings: EngineSettings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, settings.log_level))
