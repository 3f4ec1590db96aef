"""Rule-based language classification for catalog text (id/ms/en/nl/jv).

Scores every supported language against its pattern library and returns
the best supported code.  Short or ambiguous text that does not clear the
confidence gate falls back to ``"id"``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pustaka.catalog.models import DEFAULT_LANGUAGE, LanguageCode
from pustaka.errors import ClassificationError
from pustaka.language.patterns import compiled_boosts, compiled_patterns
from pustaka.text.normalize import normalize_text


DEFAULT_MIN_TOKEN_LENGTH = 3
LONG_TOKEN_LENGTH = 5
LONG_TOKEN_WEIGHT = 4
SHORT_TOKEN_WEIGHT = 3
DENSITY_SCALE = 20
CONFIDENCE_PER_TOKEN = 2

logger = logging.getLogger(__name__)

# Title prefixes first, then substrings.
_TITLE_RULES: tuple[tuple[re.Pattern[str], LanguageCode], ...] = (
    (re.compile(r"^(?:a )?history of\b"), LanguageCode.EN),
    (re.compile(r"^(?:an )?introduction to\b"), LanguageCode.EN),
    (re.compile(r"^(?:studies|essays|notes) (?:in|on)\b"), LanguageCode.EN),
    (re.compile(r"^the "), LanguageCode.EN),
    (re.compile(r"^(?:geschiedenis|beschrijving|verslag) van\b"), LanguageCode.NL),
    (re.compile(r"^bijdragen? tot\b"), LanguageCode.NL),
    (re.compile(r"^(?:de|het) "), LanguageCode.NL),
    (re.compile(r"\b(?:serat|babad) "), LanguageCode.JV),
    (re.compile(r"\bnederlandsch"), LanguageCode.NL),
    (re.compile(r"\b(?:tanah melayu|universiti)\b"), LanguageCode.MS),
)


@dataclass(frozen=True, slots=True)
class LanguageScore:
    """Per-language score components, kept for explainability."""

    language: LanguageCode
    pattern_score: int = 0
    token_score: int = 0
    density_bonus: int = 0
    context_bonus: int = 0

    @property
    def total(self) -> int:
        return self.pattern_score + self.token_score + self.density_bonus + self.context_bonus


@dataclass(frozen=True, slots=True)
class LanguageDetection:
    language: LanguageCode
    scores: tuple[LanguageScore, ...]
    token_count: int
    threshold: int
    is_fallback: bool

    def score_for(self, language: LanguageCode) -> LanguageScore:
        for score in self.scores:
            if score.language is language:
                return score
        raise KeyError(language)

    def to_dict(self) -> dict[str, object]:
        return {
            "language": self.language.value,
            "token_count": self.token_count,
            "threshold": self.threshold,
            "is_fallback": self.is_fallback,
            "scores": {
                score.language.value: {
                    "pattern": score.pattern_score,
                    "token": score.token_score,
                    "density": score.density_bonus,
                    "context": score.context_bonus,
                    "total": score.total,
                }
                for score in self.scores
            },
        }


def _fallback_detection(*, token_count: int = 0, scores: tuple[LanguageScore, ...] = ()) -> LanguageDetection:
    return LanguageDetection(
        language=DEFAULT_LANGUAGE,
        scores=scores,
        token_count=token_count,
        threshold=token_count * CONFIDENCE_PER_TOKEN,
        is_fallback=True,
    )


def explain_language(text: str | None, *, min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> LanguageDetection:
    """Score *text* against every language and report how the winner was chosen.

    Raises ``ClassificationError`` for non-text input; callers that need
    the never-failing contract use ``detect_language``.
    """
    if text is not None and not isinstance(text, str):
        raise ClassificationError(f"Text must be a string, got {type(text).__name__}")

    normalized = normalize_text(text, min_length=min_token_length)
    tokens = normalized.tokens
    if not tokens:
        return _fallback_detection()

    context: dict[LanguageCode, int] = {language: 0 for language in LanguageCode}
    for boost, regex in compiled_boosts():
        if regex.search(normalized.text):
            for language in boost.languages:
                context[language] += boost.bonus

    scores: list[LanguageScore] = []
    for language, patterns in compiled_patterns().items():
        pattern_score = sum(len(pattern.regex.findall(normalized.text)) * pattern.weight for pattern in patterns)

        token_score = 0
        matched_tokens = 0
        for token in tokens:
            if any(pattern.regex.search(token) for pattern in patterns):
                matched_tokens += 1
                token_score += LONG_TOKEN_WEIGHT if len(token) > LONG_TOKEN_LENGTH else SHORT_TOKEN_WEIGHT

        density = matched_tokens / len(tokens)
        scores.append(
            LanguageScore(
                language=language,
                pattern_score=pattern_score,
                token_score=token_score,
                density_bonus=round(density * DENSITY_SCALE),
                context_bonus=context[language],
            )
        )

    # Strict comparison keeps the earlier (default-first) language on ties.
    best = scores[0]
    for score in scores[1:]:
        if score.total > best.total:
            best = score

    threshold = len(tokens) * CONFIDENCE_PER_TOKEN
    if best.total <= 0 or best.total < threshold:
        return _fallback_detection(token_count=len(tokens), scores=tuple(scores))

    return LanguageDetection(
        language=best.language,
        scores=tuple(scores),
        token_count=len(tokens),
        threshold=threshold,
        is_fallback=False,
    )


def detect_language(text: str | None, *, min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> LanguageCode:
    """Return the best-supported language code for *text*, ``"id"`` when unsure.

    Never raises: evaluation failures are logged and answered with the
    default language.
    """
    try:
        return explain_language(text, min_token_length=min_token_length).language
    except Exception:
        logger.warning("Language detection failed; using %s", DEFAULT_LANGUAGE.value, exc_info=True)
        return DEFAULT_LANGUAGE


def _title_rule_language(title: str) -> LanguageCode | None:
    lowered = title.strip().lower()
    for pattern, language in _TITLE_RULES:
        if pattern.search(lowered):
            return language
    return None


def classify_title(title: str | None, *, min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> LanguageDetection:
    """Like ``explain_language`` but short-circuits on unambiguous title markers."""
    if title is not None and not isinstance(title, str):
        raise ClassificationError(f"Title must be a string, got {type(title).__name__}")

    language = _title_rule_language(title or "")
    if language is None:
        return explain_language(title, min_token_length=min_token_length)

    token_count = len(normalize_text(title, min_length=min_token_length).tokens)
    return LanguageDetection(
        language=language,
        scores=(),
        token_count=token_count,
        threshold=token_count * CONFIDENCE_PER_TOKEN,
        is_fallback=False,
    )


def detect_language_from_title(title: str | None, *, min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> LanguageCode:
    """Fast path for short titles; same fallback contract as ``detect_language``."""
    try:
        return classify_title(title, min_token_length=min_token_length).language
    except Exception:
        logger.warning("Title language detection failed; using %s", DEFAULT_LANGUAGE.value, exc_info=True)
        return DEFAULT_LANGUAGE
