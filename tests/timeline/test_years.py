from __future__ import annotations

import pytest

from pustaka.catalog.models import Era
from pustaka.timeline.years import era_for_year, era_label, extract_year


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1925", 1925),
        (" 1925 ", 1925),
        ("[1925]", 1925),
        ("[1925-1930]", 1925),
        ("Batavia : Kolff, 1925", 1925),
        ("cet. 2, 1987", 1987),
        ("[18-?]", 1800),
        ("[19-?]", 1900),
    ],
)
def test_extract_year_formats(raw: str, expected: int) -> None:
    assert extract_year(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "tanpa tahun", "s.a.", "0999", "[0500]", 1925])
def test_unparseable_or_out_of_range_years_are_none(raw: object) -> None:
    assert extract_year(raw) is None  # type: ignore[arg-type]


def test_first_matching_pattern_decides() -> None:
    # The bracketed year wins over the later plain year.
    assert extract_year("[1890], cetak ulang 1990") == 1890


@pytest.mark.parametrize(
    ("year", "era"),
    [
        (1500, Era.PRE_COLONIAL),
        (1799, Era.PRE_COLONIAL),
        (1800, Era.COLONIAL),
        (1945, Era.COLONIAL),
        (1946, Era.EARLY_INDEPENDENCE),
        (1965, Era.EARLY_INDEPENDENCE),
        (1966, Era.NEW_ORDER),
        (1998, Era.NEW_ORDER),
        (1999, Era.REFORM),
        (None, Era.UNKNOWN),
    ],
)
def test_era_boundaries(year: int | None, era: Era) -> None:
    assert era_for_year(year) is era


def test_era_labels_are_indonesian() -> None:
    assert era_label(Era.NEW_ORDER) == "orde baru"
    assert era_label(Era.UNKNOWN) == "tidak diketahui"
