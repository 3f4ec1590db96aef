"""Field filters applied to catalog records before ranking."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pustaka.catalog.models import CatalogRecord
from pustaka.text.normalize import lowercase
from pustaka.timeline.years import extract_year


@dataclass(frozen=True, slots=True)
class SearchFilters:
    """Optional narrowing criteria; text filters are case-insensitive substrings."""

    author: str | None = None
    publisher: str | None = None
    year_from: int | None = None
    year_to: int | None = None
    category: str | None = None

    def __post_init__(self) -> None:
        if self.year_from is not None and self.year_to is not None and self.year_from > self.year_to:
            raise ValueError("year_from cannot be greater than year_to")

    @property
    def is_empty(self) -> bool:
        return not (self.author or self.publisher or self.category) and self.year_from is None and self.year_to is None

    def matches(self, record: CatalogRecord) -> bool:
        if self.author and lowercase(self.author) not in lowercase(record.author):
            return False
        if self.publisher and lowercase(self.publisher) not in lowercase(record.publisher):
            return False
        if self.category and lowercase(self.category) != lowercase(record.category):
            return False

        if self.year_from is not None or self.year_to is not None:
            year = extract_year(record.year_raw)
            if year is None:
                return False
            if self.year_from is not None and year < self.year_from:
                return False
            if self.year_to is not None and year > self.year_to:
                return False
        return True

    def apply(self, records: Iterable[CatalogRecord]) -> list[CatalogRecord]:
        if self.is_empty:
            return list(records)
        return [record for record in records if self.matches(record)]

    def to_dict(self) -> dict[str, object]:
        return {
            "author": self.author,
            "publisher": self.publisher,
            "year_from": self.year_from,
            "year_to": self.year_to,
            "category": self.category,
        }
