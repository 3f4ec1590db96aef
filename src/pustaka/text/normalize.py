"""Lowercasing and tokenization shared by every scorer and classifier."""

from __future__ import annotations

from dataclasses import dataclass
import re
import unicodedata

from razdel import tokenize


_WORD_RE = re.compile(r"\w", re.UNICODE)
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class NormalizedText:
    """Lowercased source string kept next to its word tokens.

    ``text`` serves substring and phrase checks, ``tokens`` serves
    whole-word and keyword-density checks.
    """

    text: str
    tokens: tuple[str, ...]


def lowercase(text: str | None) -> str:
    """Collapse whitespace and lowercase; ``None`` becomes an empty string."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", str(text)).strip().lower()


def normalize(text: str | None, *, min_length: int = 1) -> list[str]:
    """Return lowercased word tokens of *text* at least *min_length* chars long.

    Punctuation tokens are dropped; hyphenated words such as
    ``undang-undang`` stay a single token.  Never raises for empty input.
    """
    lowered = lowercase(text)
    if not lowered:
        return []

    tokens: list[str] = []
    for token in tokenize(lowered):
        value = token.text.strip()
        if value and _WORD_RE.search(value) and len(value) >= min_length:
            tokens.append(value)
    return tokens


def normalize_text(text: str | None, *, min_length: int = 1) -> NormalizedText:
    lowered = lowercase(text)
    return NormalizedText(text=lowered, tokens=tuple(normalize(lowered, min_length=min_length)))


def fold_for_sort(text: str | None) -> str:
    """Accent-folded, casefolded key for locale-insensitive title ordering."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", str(text))
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return _WHITESPACE_RE.sub(" ", stripped).strip().casefold()
