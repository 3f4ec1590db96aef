"""Publication-year parsing for free-text catalog year fields.

Catalog years arrive as ``"1925"``, ``"[1925]"``, ``"[1925-1930]"``,
``"cet. 2, 1987"`` or ``"[18-?]"``.  Patterns are tried in priority order
and the first one that matches decides the outcome.
"""

from __future__ import annotations

import re

from pustaka.catalog.models import Era


MIN_YEAR = 1000
MAX_YEAR = 2999

# ---------------------------------------------------------------------------
# Pattern library
# ---------------------------------------------------------------------------

# Whole field is a year: "1925"
_EXACT_YEAR_RE = re.compile(r"^(\d{4})$")

# Bracketed (inferred) year: "[1925]"
_BRACKET_YEAR_RE = re.compile(r"\[(\d{4})\]")

# Bracketed range, earliest year wins: "[1925-1930]"
_BRACKET_RANGE_RE = re.compile(r"\[(\d{4})-\d{4}\]")

# Any four-digit run: "Batavia : Kolff, 1925"
_ANY_YEAR_RE = re.compile(r"(\d{4})")

# Known century, unknown decade: "[18-?]"
_INCOMPLETE_CENTURY_RE = re.compile(r"\[(\d{2})-\?\]")

_YEAR_PATTERNS = (_EXACT_YEAR_RE, _BRACKET_YEAR_RE, _BRACKET_RANGE_RE, _ANY_YEAR_RE)

_ERA_LABELS = {
    Era.PRE_COLONIAL: "pra-kolonial",
    Era.COLONIAL: "kolonial",
    Era.EARLY_INDEPENDENCE: "kemerdekaan awal",
    Era.NEW_ORDER: "orde baru",
    Era.REFORM: "reformasi",
    Era.UNKNOWN: "tidak diketahui",
}


def _in_range(year: int) -> int | None:
    return year if MIN_YEAR <= year <= MAX_YEAR else None


def extract_year(raw: str | None) -> int | None:
    """Return the publication year encoded in *raw*, or ``None``."""
    if not raw or not isinstance(raw, str):
        return None

    text = raw.strip()
    for pattern in _YEAR_PATTERNS:
        match = pattern.search(text)
        if match:
            return _in_range(int(match.group(1)))

    match = _INCOMPLETE_CENTURY_RE.search(text)
    if match:
        return int(match.group(1)) * 100
    return None


def era_for_year(year: int | None) -> Era:
    if year is None:
        return Era.UNKNOWN
    if year < 1800:
        return Era.PRE_COLONIAL
    if year <= 1945:
        return Era.COLONIAL
    if year <= 1965:
        return Era.EARLY_INDEPENDENCE
    if year <= 1998:
        return Era.NEW_ORDER
    return Era.REFORM


def era_label(era: Era) -> str:
    """Indonesian display label for *era*."""
    return _ERA_LABELS[era]
